import os
import tempfile

SVG_HEADER = ('<svg xmlns="http://www.w3.org/2000/svg" '
              'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape">')


def svg_document(body):
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{SVG_HEADER}\n{body}\n</svg>\n'


class TempSVGMixin:
    """Writes inline SVG fixtures to a temporary directory."""

    def setUp(self):
        super().setUp()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)

    def tmp_path(self, name):
        return os.path.join(self._tmpdir.name, name)

    def write_svg(self, body, name="level.svg"):
        path = self.tmp_path(name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(svg_document(body))
        return path
