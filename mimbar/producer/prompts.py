"""
Static prompt data for the script producer.

Topic suggestions, audience and tone choices, and the duration buckets
with their length instructions.  The producer is asked for a bare JSON
array of blocks in the shape documented by :data:`SYSTEM_PROMPT`.
"""

from typing import Dict, List

from .base_producer import ScriptRequest

RAMADHAN_TOPICS: List[str] = [
    "Marhaban Ya Ramadhan: Menyambut Tamu Agung",
    "Keutamaan Bulan Ramadhan: Syahrul Mubarak",
    "Tujuan Utama Puasa: Meraih Derajat Taqwa",
    "Syarat & Rukun Puasa: Agar Ibadah Sah",
    "Hal-Hal yang Membatalkan Puasa & Pahala Puasa",
    "Keutamaan Sahur: Berkah di Akhir Malam",
    "Adab Berbuka Puasa & Menyegerakannya",
    "Keutamaan Shalat Tarawih & Witir",
    "Tadarus Al-Qur'an: Menghidupkan Malam Ramadhan",
    "Sedekah di Bulan Ramadhan: Melipatgandakan Pahala",
    "Keutamaan Memberi Makan Orang Berbuka (Ifthar)",
    "Lailatul Qadar: Malam Lebih Baik dari 1000 Bulan",
    "Tanda-Tanda Mendapatkan Lailatul Qadar",
    "Nuzulul Qur'an: Sejarah Turunnya Wahyu Pertama",
    "I'tikaf: Menjemput Ampunan di Masjid",
    "Zakat Fitrah: Mensucikan Jiwa & Harta",
    "Golongan yang Berhak Menerima Zakat (Asnaf)",
    "Orang yang Diperbolehkan Tidak Berpuasa",
    "Membayar Fidyah & Qadha Puasa",
    "Puasa Mata, Telinga, dan Hati (Puasa Khusus)",
    "Bahaya Ghibah: Menggugurkan Pahala Puasa",
    "Menjaga Lisan: Diam itu Emas saat Puasa",
    "Menahan Amarah: Puasa Emosional",
    "Sabar: Intisari Ibadah Puasa",
    "Syukur Nikmat di Bulan Suci",
    "Taubat Nasuha: Momentum Kembali pada Allah",
    "Keajaiban Doa Orang yang Berpuasa",
    "Ramadhan Bulan Pendidikan (Syahrut Tarbiyah)",
    "Ramadhan Bulan Jihad Melawan Hawa Nafsu",
    "Mempererat Ukhuwah Islamiyah & Silaturahmi",
    "Birrul Walidain: Berbakti pada Orang Tua di Ramadhan",
    "Keutamaan Qiyamul Lail",
    "Pintu Ar-Rayyan: Pintu Surga Khusus Orang Berpuasa",
    "Tidur Orang Puasa: Antara Ibadah & Kemalasan",
    "Bau Mulut Orang Puasa: Lebih Wangi dari Kasturi",
    "Larangan Berdusta & Bersaksi Palsu",
    "Meneladani Kedermawanan Nabi di Bulan Ramadhan",
    "Pentingnya Istighfar Menjelang Sahur",
    "Menjaga Shalat 5 Waktu Berjamaah",
    "Dzikir Pagi Petang saat Ramadhan",
    "Meraih Husnul Khotimah di Bulan Suci",
    "Tanda-Tanda Amalan Ramadhan Diterima",
    "Kesedihan Berpisah dengan Ramadhan",
    "Menyambut Idul Fitri dengan Gembira & Syukur",
    "Makna Kembali Fitrah di Hari Raya",
    "Puasa Sunnah 6 Hari di Bulan Syawal",
    "Menjaga Semangat Ibadah Pasca Ramadhan",
    "Bahaya Israf (Berlebih-lebihan) saat Berbuka",
    "Manajemen Waktu Produktif saat Ramadhan",
    "Peran Wanita/Ibu dalam Menghidupkan Ramadhan",
]

AUDIENCES: List[str] = [
    "Umum",
    "Anak Muda / Milenial",
    "Bapak-bapak",
    "Ibu-ibu Pengajian",
]

TONES: List[str] = ["Santai", "Tegas", "Menyentuh", "Semangat"]

# Duration bucket → length instruction (very-short .. very-long)
DURATION_INSTRUCTIONS: Dict[str, str] = {
    "3 Menit": "Buat naskah SANGAT SINGKAT (±300 kata). Fokus 1 poin utama saja.",
    "5 Menit": "Buat naskah SINGKAT (±500 kata). Fokus 2 poin utama.",
    "7 Menit": "Buat naskah SEDANG (±800 kata). Penjelasan agak detail dengan contoh.",
    "15 Menit": "Buat naskah PANJANG (±1500 kata). Bahas mendalam dengan sirah/kisah.",
    "20 Menit": (
        "Buat naskah SANGAT PANJANG (±2000 kata). "
        "Kajian mendalam, banyak dalil dan kisah."
    ),
}

DURATIONS: List[str] = list(DURATION_INSTRUCTIONS)

SYSTEM_PROMPT = """Anda adalah "MimbarPro", asisten pembuat naskah kultum Islami.
Output WAJIB berupa JSON Array murni yang berisi objek-objek naskah.

Skema JSON per item:
{
    "type": "opening" | "content" | "doa",
    "title": "string (Judul Bagian)",
    "arabic": "string (Teks Arab opsional)",
    "text": "string (Isi ceramah)",
    "dalil": { "arabic": "string", "source": "string", "meaning": "string" },
    "cue": "string (Instruksi visual/nada)"
}
"""


def build_system_prompt() -> str:
    """Return the fixed instruction describing the expected JSON shape."""
    return SYSTEM_PROMPT


def length_instruction(duration: str) -> str:
    """Look up the length instruction; unknown buckets pass through verbatim."""
    return DURATION_INSTRUCTIONS.get(duration, duration)


def build_user_prompt(request: ScriptRequest) -> str:
    """Compose the per-request prompt from the four form parameters."""
    return (
        f"Topik: {request.topic}, Audience: {request.audience}, "
        f"Durasi: {request.duration}. "
        f"Instruksi Panjang: {length_instruction(request.duration)}, "
        f"Tone: {request.tone}"
    )
