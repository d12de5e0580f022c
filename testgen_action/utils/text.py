import difflib

NO_NEWLINE_MARKER = "\\ No newline at end of file\n"


def normalize_newlines(text: str) -> str:
    if not text:
        return ""
    return text.replace("\r\n", "\n")


def unified_diff_body(before: str, after: str, context: int = 3) -> str:
    """
    Unified diff of two file contents without the ``---``/``+++`` header,
    so it starts at the first ``@@`` line. Returns "" when nothing changed.

    A side whose last line has no trailing newline gets the usual
    ``\\ No newline at end of file`` marker after that line, so the body
    applies with ``git apply`` unchanged.
    """
    a = before.splitlines(keepends=True)
    b = after.splitlines(keepends=True)
    out = []
    for ln in list(difflib.unified_diff(a, b, n=context))[2:]:
        if ln.endswith("\n"):
            out.append(ln)
        else:
            out.append(ln + "\n" + NO_NEWLINE_MARKER)
    return "".join(out)
