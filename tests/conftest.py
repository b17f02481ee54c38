import pytest

EXAMPLE_POINTS = [
    (162, 817, 812),
    (57, 618, 57),
    (906, 360, 560),
    (592, 479, 940),
    (352, 342, 300),
    (466, 668, 158),
    (542, 29, 236),
    (431, 825, 988),
    (739, 650, 466),
    (52, 470, 668),
    (216, 146, 977),
    (819, 987, 18),
    (117, 168, 530),
    (805, 96, 715),
    (346, 949, 466),
    (970, 615, 88),
    (941, 993, 340),
    (862, 61, 35),
    (984, 92, 344),
    (425, 690, 689),
]


@pytest.fixture
def example_points():
    return list(EXAMPLE_POINTS)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "boxes.txt"
    path.write_text("\n".join(",".join(str(value) for value in point) for point in EXAMPLE_POINTS) + "\n")
    return path
