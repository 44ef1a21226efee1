"""Command-line argument normalization.

fsclean accepts the attached ``-p:<path>`` / ``--max-age:<duration>``
style alongside the usual space-separated form. Attached values are
split into two tokens before Typer parses the command line.
"""

# Options whose value may be attached with a colon
_VALUE_OPTIONS: frozenset[str] = frozenset(
    {
        "-p",
        "--path",
        "-a",
        "--max-age",
        "-i",
        "--ignore",
        "-l",
        "--log",
        "-c",
        "--config",
    }
)

# Long flags matched case-insensitively
_FLAG_OPTIONS: frozenset[str] = frozenset({"--delete-empty"})


def normalize_args(args: list[str]) -> list[str]:
    """Rewrite colon-attached option values into separate tokens.

    Option names are matched case-insensitively, so ``-P:/tmp`` and
    ``--Max-Age:7d`` are accepted. Only the first colon separates name
    and value, which keeps values such as ``C:\\temp`` intact.

    Args:
        args: Raw command-line arguments (without the program name).

    Returns:
        Arguments in a form Typer understands.
    """
    normalized: list[str] = []
    expects_value = False

    for arg in args:
        # Value of a space-separated option, passed through verbatim
        if expects_value:
            normalized.append(arg)
            expects_value = False
            continue

        head, sep, value = arg.partition(":")
        name = head.lower()

        if not sep and name in _VALUE_OPTIONS:
            normalized.append(arg)
            expects_value = True
        elif sep and name in _VALUE_OPTIONS:
            normalized.extend([name, value])
        elif arg.lower() in _FLAG_OPTIONS:
            normalized.append(arg.lower())
        else:
            normalized.append(arg)

    return normalized
