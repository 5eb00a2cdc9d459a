# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark CLI subcommands."""
