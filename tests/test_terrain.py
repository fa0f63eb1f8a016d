import pytest

from zombiesim.terrain import Perlin, TerrainGenerator, print_map, render_map


@pytest.mark.parametrize("point", [(0, 0), (3, -2), (17, 5), (-40, 255)])
def test_perlin_is_zero_on_lattice_points(point):
    assert Perlin(11).get(point) == 0.0


def test_perlin_values_stay_in_range_and_vary():
    noise = Perlin(3)
    values = [noise.get((x * 0.37, y * 0.53)) for x in range(30) for y in range(30)]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert any(abs(v) > 0.01 for v in values)


def test_perlin_is_deterministic_per_seed():
    points = [(x * 0.3, y * 0.7) for x in range(10) for y in range(10)]
    first = [Perlin(7).get(p) for p in points]
    second = [Perlin(7).get(p) for p in points]
    assert first == second


def test_perlin_seeds_give_different_fields():
    points = [(x * 0.3, y * 0.7) for x in range(10) for y in range(10)]
    assert [Perlin(1).get(p) for p in points] != [Perlin(2).get(p) for p in points]


def test_generator_splits_seed_into_halves():
    gen = TerrainGenerator((3 << 32) | 7)
    assert gen.altitude_perlin.seed == 7
    assert gen.temperature_perlin.seed == 3


def test_generate_shape():
    terrain = TerrainGenerator(42).generate(6, 4, 3, 10.0)
    assert len(terrain) == 4
    assert all(len(row) == 6 for row in terrain)
    assert all(len(cell) == 2 for row in terrain for cell in row)


def test_single_level_altitude_and_temperature_follow_noise_fields():
    gen = TerrainGenerator(99)
    terrain = gen.generate(8, 5, 1, 10.0)
    for y in range(5):
        for x in range(8):
            assert terrain[y][x][0] == pytest.approx(gen.altitude_perlin.get((x / 10.0, y / 10.0)))
            assert terrain[y][x][1] == pytest.approx(gen.temperature_perlin.get((x / 20.0, y / 20.0)))


def test_origin_is_flat():
    terrain = TerrainGenerator(5).generate(3, 3, 5, 100.0)
    assert terrain[0][0] == [0.0, 0.0]


def test_same_lower_bits_share_altitude_same_upper_bits_share_temperature():
    a = TerrainGenerator(5).generate(10, 10, 2, 8.0)
    b = TerrainGenerator((9 << 32) | 5).generate(10, 10, 2, 8.0)
    c = TerrainGenerator(6).generate(10, 10, 2, 8.0)
    assert [[cell[0] for cell in row] for row in a] == [[cell[0] for cell in row] for row in b]
    assert [[cell[1] for cell in row] for row in a] == [[cell[1] for cell in row] for row in c]


def test_render_map_gradient_ends_and_middle():
    assert render_map([[[-1.0], [1.0], [0.0]]], 0) == " @~\n"


def test_render_map_missing_index():
    assert render_map([[[0.5]]], 1) == "?\n"


def test_render_map_clamps_out_of_range_values():
    out = render_map([[[5.0], [1.0], [-5.0], [-1.0]]], 0)
    assert out[0] == out[1]
    assert out[2] == out[3]


def test_render_map_line_per_row():
    terrain = TerrainGenerator(1).generate(7, 3, 2, 5.0)
    lines = render_map(terrain, 1).splitlines()
    assert len(lines) == 3
    assert all(len(line) == 7 for line in lines)


def test_print_map_matches_render(capsys):
    terrain = TerrainGenerator(2).generate(5, 4, 2, 5.0)
    print_map(terrain, 0)
    assert capsys.readouterr().out == render_map(terrain, 0)