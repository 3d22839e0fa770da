"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DEBOUNCE_SECONDS = 0.5
MIN_IDENTIFIER_LENGTH = 3

CONTACT_PATTERN = r"^08[0-9]{8,11}$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

CONTACT_FORMAT_HINT = "Format nomor kontak tidak valid. Harus diawali 08 dan terdiri dari 10-13 digit."
EMAIL_FORMAT_HINT = "Format email tidak valid. Contoh: nama@domain.com"

# Message returned by the API when a record is rejected for its contact number.
CONTACT_REJECTED_MESSAGE = "Format Nomor Kontak tidak valid. Harus diawali 08 dan memiliki 10-13 digit."
EMPLOYEE_NOT_FOUND_MESSAGE = "Pegawai tidak ditemukan"
GENERIC_SUBMIT_ERROR = "Gagal menyimpan presensi. Silakan coba lagi."
SERVER_ERROR_MESSAGE = "Server Error"

CSV_DATETIME_FORMAT = "%d/%m/%Y %H:%M"
