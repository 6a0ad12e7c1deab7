# topmark:header:start
#
#   project      : FileAssoc
#   file         : __init__.py
#   file_relpath : src/fileassoc/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small, dependency-free helpers shared across FileAssoc."""
