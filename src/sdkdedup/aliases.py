USAGE_TEXT = """SDK Deduplicator - Deduplicate assemblies in an SDK installation

Usage: sdkdedup <directory> [options]

Arguments:
  <directory>        Path to SDK installation directory to deduplicate

Options:
  --hard-links, -h   Use hard links instead of symbolic links
  --verbose, -v      Enable verbose output
  --extensions, -x   File extensions to deduplicate, comma separated or repeated
                     (default: .dll,.exe)
  --verify           Compare file content byte-for-byte before linking
  --delete-first     Delete each duplicate before creating its link
                     (default: create the link aside and rename it into place)
  --help, -?         Show this help message
"""

EPILOG_TEXT = """
Examples:
  sdkdedup "C:\\Program Files\\dotnet" --hard-links
  sdkdedup /usr/share/dotnet
  sdkdedup -x .dll,.exe,.so ./layout -v
"""

HARD_LINKS_HELP_TEXT = "Use hard links instead of symbolic links"

VERIFY_HELP_TEXT = (
    "Compare content byte-for-byte before replacing a duplicate.\n"
    "Without it, equal xxHash64 fingerprints are trusted as equal content."
)

DELETE_FIRST_HELP_TEXT = (
    "Delete each duplicate before creating its link.\n"
    "If link creation then fails the file is gone."
)
