import sys
from pathlib import Path

# Ensure we import the repo-local xdiff2 (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from xdiff2 import DiffConfig, diff, format_edit_script, format_tree, format_tree_diff, parse_xml  # noqa: E402

DATA = ROOT / "tests" / "data"


def main():
    old = parse_xml((DATA / "profile1.xml").read_text(encoding="utf-8"))
    new = parse_xml((DATA / "profile2.xml").read_text(encoding="utf-8"))

    config = DiffConfig()
    config.with_node_id = True
    print(format_tree(old, config))
    print()
    print(format_tree(new, config))
    print()

    edits = diff(old, new)
    print(format_edit_script(edits))
    print()
    print(format_tree_diff(old, new, edits))


if __name__ == "__main__":
    main()
