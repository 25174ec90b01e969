import os
import sys
from pathlib import Path

# Ensure `python/` directory is on sys.path when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from passstore import FROM_ENV, PassStore, PassStoreError


def main(argv: list[str]) -> int:
    keys = argv[1:] or ["example/api-key"]

    # FROM_ENV honours PASSWORD_STORE_DIR; PassStore() alone would always
    # use ~/.password-store.
    try:
        store = PassStore(FROM_ENV)
    except PassStoreError as e:
        print(f"[passstore] cannot open store: {e}", file=sys.stderr)
        return 1
    print("[passstore] directory:", store.get_path())
    print("[passstore] PASSWORD_STORE_DIR:", os.environ.get("PASSWORD_STORE_DIR"))

    for key in keys:
        if key not in store:
            print(f"[passstore] {key}: missing")
            continue
        # Only report the length; never print the secret itself.
        print(f"[passstore] {key}: {len(store[key])} chars")

    print("[passstore] get with default:", store.get("does/not/exist", "<default>"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
