import sys
import xml.etree.ElementTree as ET
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from . import transforms
from .errors import SvgLevelError
from .path_data import flatten

INKSCAPE_LABEL = '{http://www.inkscape.org/namespaces/inkscape}label'


@dataclass(frozen=True, eq=False)
class PathOutline:
    points: np.ndarray
    name: Optional[str] = None
    path_id: Optional[str] = None

    def __post_init__(self):
        self.points.setflags(write=False)

    def __len__(self):
        return len(self.points)

    def segments(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        for i in range(1, len(self.points)):
            yield self.points[i - 1], self.points[i]


class NodeKind(Enum):
    GROUP = 'g'
    PATH = 'path'


def local_tag(element) -> str:
    return element.tag.split('}')[-1]


def node_kind(element) -> Optional[NodeKind]:
    tag = local_tag(element)
    for kind in NodeKind:
        if kind.value == tag:
            return kind
    return None


def _log(msg):
    print(msg, file=sys.stderr)


def _effective_transform(element, parent_xform):
    attr = element.get('transform')
    if attr is None:
        return parent_xform
    return transforms.compose(parent_xform, transforms.parse_transform(attr))


def _children(element, kind):
    return [child for child in element if node_kind(child) is kind]


def walk(element, parent_xform, outlines: List[PathOutline], label=None,
         relative_moveto=True, debug=False):
    """
    Appends one PathOutline per <path> reachable from element to outlines.

    Child groups are fully processed before the group's own paths. label is
    the inkscape:label of the group directly enclosing a path element.
    """
    kind = node_kind(element)
    element_id = element.get('id')
    try:
        xform = _effective_transform(element, parent_xform)

        # --- GROUP ---
        if kind is NodeKind.GROUP:
            if debug: _log(f"[Walk] group id = {element_id}")
            group_label = element.get(INKSCAPE_LABEL)
            for child in _children(element, NodeKind.GROUP):
                walk(child, xform, outlines, group_label, relative_moveto, debug)
            for child in _children(element, NodeKind.PATH):
                walk(child, xform, outlines, group_label, relative_moveto, debug)
            if debug:
                for child in element:
                    if node_kind(child) is None:
                        _log(f"[Walk] skipping <{local_tag(child)}> id = {child.get('id')}")

        # --- PATH ---
        elif kind is NodeKind.PATH:
            d = element.get('d', '')
            if debug: _log(f"[Walk] path id = {element_id}\n       d = {d}")
            raw = flatten(d, relative_moveto=relative_moveto)
            points = transforms.apply_all(xform, raw)
            outlines.append(PathOutline(points, label or None, element_id))

    except SvgLevelError as err:
        raise err.located(local_tag(element), element_id)


def walk_document(root, relative_moveto=True, debug=False) -> List[PathOutline]:
    """Walks top-level groups, then top-level bare paths, from the identity."""
    outlines = []
    for kind in (NodeKind.GROUP, NodeKind.PATH):
        for child in _children(root, kind):
            walk(child, transforms.identity(), outlines,
                 relative_moveto=relative_moveto, debug=debug)
    return outlines


def load_document(filepath: str):
    # Input handle is closed as soon as the tree is in memory
    with open(filepath, 'rb') as f:
        tree = ET.parse(f)
    return tree.getroot()


def build_paths(filepath: str, relative_moveto=True, debug=False) -> List[PathOutline]:
    root = load_document(filepath)
    if local_tag(root) != 'svg':
        _log(f"[Warning] Root element is <{local_tag(root)}>, not <svg>")
    outlines = walk_document(root, relative_moveto=relative_moveto, debug=debug)
    _log(f"[Input] Loaded {len(outlines)} paths from {filepath}")
    return outlines
