# src/hdrpack/core/tree.py
from typing import Dict, List, Tuple
from pathlib import Path


def generate_layout_tree(entries: List[Tuple[str, str]], root_name: str) -> str:
    """
    Renders (relative path, label) pairs as a tree, e.g. for --dry-run.
    Leaves are annotated with their label in brackets.
    """
    tree_dict: Dict = {}
    labels: Dict[Tuple[str, ...], str] = {}
    for path, label in entries:
        parts = Path(path).parts
        labels[parts] = label
        current_level = tree_dict
        for part in parts:
            current_level = current_level.setdefault(part, {})

    lines = [f"{root_name}/"]

    def _generate_lines_recursive(subtree: Dict, prefix: str, trail: Tuple[str, ...]):
        entries_sorted = sorted(subtree.items())
        for i, (name, children) in enumerate(entries_sorted):
            is_last = (i == len(entries_sorted) - 1)
            connector = "└── " if is_last else "├── "
            here = trail + (name,)
            label = labels.get(here)
            suffix = f"  [{label}]" if label and not children else ""
            lines.append(f"{prefix}{connector}{name}{suffix}")

            if children:
                new_prefix = prefix + ("    " if is_last else "│   ")
                _generate_lines_recursive(children, new_prefix, here)

    _generate_lines_recursive(tree_dict, "", ())
    return "\n".join(lines) + "\n"
