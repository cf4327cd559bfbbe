# topmark:header:start
#
#   project      : BlockGen
#   file         : exit_codes.py
#   file_relpath : src/blockgen/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Exit codes for the BlockGen CLI.

BlockGen aligns with the BSD `sysexits` convention so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BlockGen CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: A library error without a more specific mapping.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed directive script. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONTRACT_ERROR: The directives broke an emitter contract (unbalanced
            blocks, malformed identifiers). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONTRACT_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
