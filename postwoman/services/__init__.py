# Services package

from .auth import apply_auth, basic_credentials
from .http_executor import build_request, send_request, execute_request
from .history_service import build_history, save_history, restore_request
from .json_formatter import format_json, minify_json, is_valid_json
from .collection_codec import export_folder, import_folder
from .codegen import generate_code, generate_curl, generate_python, generate_swift

__all__ = [
    "apply_auth",
    "basic_credentials",
    "build_request",
    "send_request",
    "execute_request",
    "build_history",
    "save_history",
    "restore_request",
    "format_json",
    "minify_json",
    "is_valid_json",
    "export_folder",
    "import_folder",
    "generate_code",
    "generate_curl",
    "generate_python",
    "generate_swift",
]
