from pathlib import Path

import pytest
from PIL import Image

SAMPLE_FNT = (
    'info face="Test" size=32 bold=0 italic=0 charset="" unicode=1 stretchH=100 '
    'smooth=1 aa=1 padding=0,0,0,0 spacing=1,1 outline=0\n'
    'common lineHeight=40 base=30 scaleW=256 scaleH=256 pages=1 packed=0 '
    'alphaChnl=1 redChnl=0 greenChnl=0 blueChnl=0\n'
    'page id=0 file="test.png"\n'
    'chars count=4\n'
    'char id=32   x=0    y=0    width=0    height=0    xoffset=0    yoffset=0    xadvance=8    page=0  chnl=15\n'
    'char id=63   x=0    y=0    width=9    height=12   xoffset=0    yoffset=4    xadvance=10   page=0  chnl=15\n'
    'char id=65   x=10   y=0    width=10   height=12   xoffset=0    yoffset=4    xadvance=11   page=0  chnl=15\n'
    'char id=86   x=20   y=0    width=10   height=12   xoffset=1    yoffset=4    xadvance=10   page=0  chnl=15\n'
    'kernings count=1\n'
    'kerning first=65  second=86  amount=-2\n'
)


@pytest.fixture
def sample_text():
    return SAMPLE_FNT


@pytest.fixture
def font_dir(tmp_path: Path):
    """Directory holding sample.fnt and a 256x256 test.png page."""
    (tmp_path / "sample.fnt").write_text(SAMPLE_FNT, encoding="utf-8")
    Image.new("RGBA", (256, 256)).save(tmp_path / "test.png")
    return tmp_path


@pytest.fixture
def font_path(font_dir: Path):
    return font_dir / "sample.fnt"
