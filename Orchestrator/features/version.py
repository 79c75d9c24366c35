from importlib import metadata


def extract_version_prefix(text):
    """Leading dotted-numeric part: '1.2.3-beta+abc' -> '1.2.3'."""
    s = str(text or "")
    i = 0
    saw_digit = False
    while i < len(s):
        c = s[i]
        if c.isdigit():
            saw_digit = True
        elif not (c == "." and saw_digit):
            break
        i += 1
    return s[:i].strip(".")


def _candidates(distribution):
    try:
        yield metadata.version(distribution)
    except metadata.PackageNotFoundError:
        pass
    from Orchestrator import __version__

    yield __version__


def product_version(distribution=None):
    if distribution is None:
        from Orchestrator import DISTRIBUTION_NAME

        distribution = DISTRIBUTION_NAME
    for candidate in _candidates(distribution):
        s = str(candidate or "").strip()
        if not s:
            continue
        if s[0] in ("v", "V"):
            s = s[1:]
        numeric = extract_version_prefix(s)
        if numeric:
            return numeric
    return "unknown"
