# topmark:header:start
#
#   project      : GenSync
#   file         : __init__.py
#   file_relpath : src/gensync/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync CLI subcommands."""
