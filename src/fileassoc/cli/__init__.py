# topmark:header:start
#
#   project      : FileAssoc
#   file         : __init__.py
#   file_relpath : src/fileassoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based developer CLI for FileAssoc."""
