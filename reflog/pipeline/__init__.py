"""
Pipeline
--------

Conversion between the memo store and portable files.

Modules:
    - memo_yaml: YAML export/import of memos and the tag registry
"""
from .memo_yaml import dump_memos, export_memos, import_memos, load_memos

__all__ = ["dump_memos", "export_memos", "import_memos", "load_memos"]
