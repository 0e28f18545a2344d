import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Render и похожие хостинги передают порт через PORT
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

TG_API_BASE = os.getenv("TG_API_BASE", "https://api.telegram.org").rstrip("/")

TG_TIMEOUT = float(os.getenv("TG_TIMEOUT", "20"))
IMAGE_TIMEOUT = float(os.getenv("IMAGE_TIMEOUT", "30"))
DECODE_TIMEOUT = float(os.getenv("DECODE_TIMEOUT", "30"))

# QR генерация (api.qrserver.com)
QR_CREATE_URL = os.getenv("QR_CREATE_URL", "https://api.qrserver.com/v1/create-qr-code/")
QR_SIZE = int(os.getenv("QR_SIZE", "400"))
QR_MARGIN = int(os.getenv("QR_MARGIN", "10"))
QR_COLOR = os.getenv("QR_COLOR", "262626")
QR_BG_COLOR = os.getenv("QR_BG_COLOR", "D9D9D9")
QR_FORMAT = "png"
QR_QZONE = 2

# Провайдеры чтения QR, порядок важен
QR_READ_QRSERVER_URL = os.getenv("QR_READ_QRSERVER_URL", "https://api.qrserver.com/v1/read-qr-code/")
QR_READ_GOQR_URL = os.getenv("QR_READ_GOQR_URL", "https://api.goqr.me/v1/read-qr-code")
QR_READ_ZXING_URL = os.getenv("QR_READ_ZXING_URL", "https://zxing.org/w/decode")

MAX_TEXT_LENGTH = 850
MAX_IMAGE_BYTES = 10 * 1024 * 1024  # 10MB

ALLOWED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/webp")
ALLOWED_IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "webp")
