import pytest

from palettron import Palettron, concat, merge, palettron
from ..samples import PRIMARY, SECONDARY

SEQUENCES = [
    (),
    ("#123456",),
    PRIMARY,
    PRIMARY + SECONDARY,
    ("#ff000080", "#00000000", "#abcdef", "#ff0000"),
]
NON_EMPTY = [s for s in SEQUENCES if s]


@pytest.mark.parametrize("colors", SEQUENCES)
def test_construction_identity(colors):
    assert palettron(colors).to_hex() == list(colors)


@pytest.mark.parametrize("a", SEQUENCES)
@pytest.mark.parametrize("b", SEQUENCES)
def test_concat_sizes_add_up(a, b):
    assert concat(a, b).size == len(a) + len(b)


@pytest.mark.parametrize("colors", SEQUENCES)
def test_self_merge_collapses(colors):
    p = palettron(colors)
    assert merge(p, p).to_hex() == p.to_hex()


def test_merge_order_is_first_seen():
    a = ["#00ff00", "#ff0000"]
    b = ["#0000ff", "#00ff00", "#ffffff"]
    assert merge(a, b).to_hex() == ["#00ff00", "#ff0000", "#0000ff", "#ffffff"]


@pytest.mark.parametrize("colors", NON_EMPTY)
@pytest.mark.parametrize("k", [-7, -1, 0, 1, 2, 5])
def test_shift_is_periodic_and_invertible(colors, k):
    p = palettron(colors)
    assert p.shift(k).to_hex() == p.shift(k + p.size).to_hex()
    assert p.shift(k).shift(-k).to_hex() == p.to_hex()
    assert p.shift(0).to_hex() == p.to_hex()


@pytest.mark.parametrize("colors", SEQUENCES)
@pytest.mark.parametrize("seed", [0, 1, "seed"])
def test_shuffle_is_deterministic_permutation(colors, seed):
    p = palettron(colors)
    assert p.shuffle(seed).to_hex() == p.shuffle(seed).to_hex()
    assert sorted(p.shuffle(seed).to_hex()) == sorted(p.to_hex())


@pytest.mark.parametrize("a, b", [(0, 1), (0, 5), (2, 2), (4, 3)])
def test_swap_is_an_involution(a, b):
    p = palettron(PRIMARY, SECONDARY)
    assert p.swap(a, b).swap(a, b).to_hex() == p.to_hex()


def test_pick_keeps_palette_order():
    p = palettron(PRIMARY, SECONDARY)
    assert p.pick([2, 0, 1]).to_hex() == p.pick([0, 1, 2]).to_hex()
    assert p.pick([5, 0]).to_hex() == ["#ff0000", "#00ffff"]


TRANSFORMATIONS = [
    lambda p: p.add("#000000"),
    lambda p: p.concat(SECONDARY),
    lambda p: p.merge(SECONDARY),
    lambda p: p.alpha(0.3),
    lambda p: p.darken(),
    lambda p: p.desaturate(),
    lambda p: p.grayscale(),
    lambda p: p.invert(),
    lambda p: p.lighten(),
    lambda p: p.rotate(),
    lambda p: p.saturate(),
    lambda p: p.reverse(),
    lambda p: p.shift(1),
    lambda p: p.swap(0, 2),
    lambda p: p.sort(key=lambda c: c.blue),
    lambda p: p.shuffle(3),
    lambda p: p.slice(1),
    lambda p: p.pick([0, 1]),
    lambda p: p.filter(lambda c, i, colors: i == 0),
    lambda p: p.modify(0, lambda c, i: c.invert()),
    lambda p: p.replace(1, "#777777"),
    lambda p: p.map(lambda c, i, colors: c.lighten()),
    lambda p: p.to_array(),
]


@pytest.mark.parametrize("transform", TRANSFORMATIONS)
def test_transformations_leave_the_source_alone(transform):
    p = palettron(PRIMARY)
    before = p.to_hex()
    result = transform(p)
    assert p.to_hex() == before
    assert result is not p


def test_end_to_end():
    assert concat(PRIMARY, SECONDARY).to_hex() == [
        "#ff0000", "#00ff00", "#0000ff", "#ffff00", "#ff00ff", "#00ffff",
    ]
    assert merge(PRIMARY, PRIMARY, SECONDARY, SECONDARY).size == 6
    assert palettron(PRIMARY).shift(1).to_hex() == ["#0000ff", "#ff0000", "#00ff00"]
    assert palettron(PRIMARY).swap(0, 1).to_hex() == ["#00ff00", "#ff0000", "#0000ff"]


def test_chaining():
    result = (
        Palettron(PRIMARY)
        .add("#ffffff")
        .shift(1)
        .pick([0, 1, 2])
        .alpha(0.5)
        .reverse()
    )
    assert result.to_hex() == ["#00ff0080", "#ff000080", "#ffffff80"]
