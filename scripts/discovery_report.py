import argparse
import json

from Orchestrator.discovery import discover, find_apps_folder, launcher_base_dir
from Orchestrator.features.version import product_version


def main():
    parser = argparse.ArgumentParser(description="Print what the launcher would discover, as JSON.")
    parser.add_argument("--base-dir", default="", help="start directory for the Apps folder search")
    args = parser.parse_args()

    base_dir = args.base_dir or launcher_base_dir()
    folder = find_apps_folder(base_dir)
    report = {
        "version": product_version(),
        "base_dir": str(base_dir),
        "apps_folder": str(folder) if folder else None,
        "apps": [
            {
                "name": app.display_name,
                "path": app.resolved_path,
                "confidence": app.match_confidence,
                "available": app.is_available(),
            }
            for app in discover(base_dir=base_dir)
        ],
    }
    print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
