from Orchestrator.config import config

_MAP = {
    "not_found": "Application not found",
    "start_failed": "Error launching application",
    "timed_out": "Application is still starting",
    "cancelled": "Launch cancelled",
}


def humanize(error_code, details=""):
    code = str(error_code or "").strip()
    msg = _MAP.get(code, "An unexpected error occurred.")
    if details:
        return f"{msg} ({details})"
    return msg


def not_found_message(display_name, path=""):
    shown = path if str(path or "").strip() else "(no path resolved)"
    url = getattr(config, "releases_url", "https://github.com/MrasmussenGit")
    folder = getattr(config, "apps_folder_name", "Apps")
    return (
        f"{display_name} wasn't found at:\n{shown}\n\n"
        f"Please download the app you are missing from:\n{url}\n\n"
        "Open the repository for the app, go to the Releases page, and download the x64 Windows binary "
        "from the Assets section. "
        f"Place the .exe into an '{folder}' folder next to the launcher."
    )


def start_failed_message(display_name, path, reason=""):
    text = f"Failed to launch {display_name} at:\n{path}"
    if reason:
        text += f"\n\n{reason}"
    return text
