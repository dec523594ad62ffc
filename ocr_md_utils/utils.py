import os
import logging
import datetime
import hashlib

def setup_logging(level=None):
    """
    Cấu hình logging đơn giản. Mức log lấy từ biến LOG_LEVEL nếu không truyền vào.
    """
    if level is None:
        level = get_env("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        level=level,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger()

def get_env(key: str, default=None):
    """
    Lấy biến môi trường với giá trị default nếu không tồn tại.
    """
    return os.getenv(key, default)

def get_float_env(key: str, default=None):
    """
    Đọc biến môi trường dạng số giây; chuỗi rỗng hoặc không có → default.
    """
    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    return float(raw)

def get_timestamp() -> str:
    """
    Trả về timestamp UTC hiện tại dạng ISO 8601 để dùng trong API responses.
    """
    return datetime.datetime.now(datetime.timezone.utc).isoformat()

def compute_file_hash(file_bytes: bytes) -> str:
    """
    Tính hash MD5 cho nội dung file.
    """
    return hashlib.md5(file_bytes).hexdigest()

def format_file_size(num_bytes: int) -> str:
    """
    Định dạng kích thước file: 0 Bytes, 512 Bytes, 1.5 KB, 2 MB...
    """
    if num_bytes <= 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value, i = float(num_bytes), 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    # bỏ số 0 thừa: 1.50 → 1.5, 2.00 → 2
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[i]}"
