from typing import Dict

from .config import CleanOptions


def keep_record(rec: Dict, options: CleanOptions) -> bool:
    if options.keep_type is not None and rec["type"] != options.keep_type:
        return False
    if options.require_name and not rec["name"]:
        return False
    if len(rec["name"]) < options.min_name_len:
        return False
    return True
