# topmark:header:start
#
#   project      : FileAssoc
#   file         : __init__.py
#   file_relpath : src/fileassoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration helpers for FileAssoc (logging)."""
