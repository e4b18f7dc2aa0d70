import sys
from typing import List, Optional, Tuple

from .svg_loader import PathOutline

MODES = ('named', 'first')

Segment = Tuple[float, float, float, float, Optional[str]]


def _quote(name):
    if name is None: name = ''
    return '"' + name.replace('\\', '\\\\').replace('"', '\\"') + '"'


class LevelExporter:
    """Writes outlines as a `Level { ... }` block of line segments."""

    @staticmethod
    def segments(outlines: List[PathOutline], mode: str = 'named') -> List[Segment]:
        if mode not in MODES:
            raise ValueError(f"unknown export mode {mode!r}")
        if mode == 'first':
            outlines = outlines[:1]

        records = []
        for outline in outlines:
            name = outline.name if mode == 'named' else None
            # Open polyline: no segment from the last point back to the first
            for start, end in outline.segments():
                records.append((float(start[0]), float(start[1]),
                                float(end[0]), float(end[1]), name))
        return records

    @staticmethod
    def render_segments(records: List[Segment], source: str, mode: str = 'named',
                        block_name: str = 'Level', indent: str = '    ') -> str:
        lines = [f"-- exported from {source}", f"{block_name} {{"]
        for x0, y0, x1, y1, name in records:
            fields = [repr(x0), repr(y0), repr(x1), repr(y1)]
            if mode == 'named':
                fields.append(_quote(name))
            lines.append(f"{indent}{{ {', '.join(fields)} }},")
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def render(outlines: List[PathOutline], source: str, mode: str = 'named',
               block_name: str = 'Level', indent: str = '    ') -> str:
        records = LevelExporter.segments(outlines, mode)
        return LevelExporter.render_segments(records, source, mode, block_name, indent)

    @staticmethod
    def export(filepath: Optional[str], outlines: List[PathOutline], source: str,
               config: dict) -> List[Segment]:
        """
        Renders the whole block first, then writes it to filepath or stdout.
        Returns the exported segment records.
        """
        export_cfg = config['export']
        records = LevelExporter.segments(outlines, export_cfg['mode'])
        text = LevelExporter.render_segments(records, source,
                                             mode=export_cfg['mode'],
                                             block_name=export_cfg['block_name'],
                                             indent=export_cfg['indent'])

        if filepath:
            with open(filepath, 'w') as f:
                f.write(text)
            print(f"[Export] Saved {len(records)} segments to {filepath}", file=sys.stderr)
        else:
            sys.stdout.write(text)
            sys.stdout.flush()
            print(f"[Export] Wrote {len(records)} segments", file=sys.stderr)
        return records
