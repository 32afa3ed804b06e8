import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


CIRCUIT_CONFIG = {
    "default_name": os.getenv("GATESIM_DEFAULT_NAME", "MyCircuit"),
    "strict": _flag("GATESIM_STRICT"),  # raise on reads of undefined nets
    "check_order": _flag("GATESIM_CHECK_ORDER"),
}

RENDER_CONFIG = {
    "dot_executable": os.getenv("GATESIM_DOT_EXECUTABLE", "dot"),
    "image_format": os.getenv("GATESIM_IMAGE_FORMAT", "png"),
    "output_dir": os.getenv("GATESIM_OUTPUT_DIR", "."),
}
