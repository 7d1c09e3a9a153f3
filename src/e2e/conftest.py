from pathlib import Path
import pytest

DATA = Path(__file__).parent / "data"

# CRLF line endings on purpose: context strings must keep them verbatim.
LONG_EXCERPT = (
    b"When I was on board H.M.S. Beagle, as naturalist, I was much struck with certain facts.  "
    b"This sketch was enlarged in 1844 into a longer essay.\r\n"
    b"My friend, who had read my sketch of 1844--honoured me by reading it.\r\n"
    b"Natural selection acts only for the good of each being, "
    b"not indeed to the animal's or plant's own good alone.\r\n"
    b"We habitually speak of an animal's organisation as\r\n"
    b"something plastic, which can be modified.\r\n"
    b"Release date first edition [xxxxx10x.xxx] please check for updates.\r\n"
)


@pytest.fixture
def short_excerpt() -> Path:
    return DATA / "short_excerpt.txt"


@pytest.fixture
def long_excerpt(tmp_path: Path) -> Path:
    p = tmp_path / "long_excerpt.txt"
    p.write_bytes(LONG_EXCERPT)
    return p
