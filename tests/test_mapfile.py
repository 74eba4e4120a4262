import pytest

from solong.errors import ErrorKind, SoLongError
from solong.mapfile import (
    GameMap,
    check_enclosed,
    check_filetype,
    count_collectables,
    find_exit,
    find_player,
    flood_fill,
    goals_reachable,
    parse_lines,
    read_map,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1000001", "1111111"]


def _write(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_bytes(text.encode("latin-1"))
    return str(path)


def test_check_filetype_accepts_ber():
    assert check_filetype("maps/level.ber") is True


def test_check_filetype_rejects_short_name():
    assert check_filetype("a.ber") is False


def test_check_filetype_rejects_other_extension():
    assert check_filetype("maps/level.txt") is False


def test_parse_lines_strips_line_endings():
    assert parse_lines(["111\n", "1P1\r\n", "111"]) == ["111", "1P1", "111"]


def test_parse_lines_bad_character():
    with pytest.raises(SoLongError) as info:
        parse_lines(["111\n", "1Z1\n"])
    assert info.value.kind is ErrorKind.BAD_CHARACTER


def test_parse_lines_uneven():
    with pytest.raises(SoLongError) as info:
        parse_lines(["1111\n", "111\n"])
    assert info.value.kind is ErrorKind.UNEVEN


def test_parse_lines_blank_crlf_line():
    with pytest.raises(SoLongError) as info:
        parse_lines(["111\n", "\r\n"])
    assert info.value.kind is ErrorKind.FORMAT


def test_parse_lines_empty_input():
    with pytest.raises(SoLongError) as info:
        parse_lines([])
    assert info.value.kind is ErrorKind.FORMAT


def test_read_map_valid(tmp_path):
    path = _write(tmp_path, "\n".join(VALID) + "\n")
    game_map = read_map(path)
    assert isinstance(game_map, GameMap)
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)
    px, py = game_map.player
    ex, ey = game_map.exit
    assert game_map.grid[py][px] == "P"
    assert game_map.grid[ey][ex] == "E"
    assert game_map.collectables == sum(row.count("C") for row in VALID)


def test_read_map_crlf(tmp_path):
    path = _write(tmp_path, "\r\n".join(VALID) + "\r\n")
    game_map = read_map(path)
    assert ["".join(row) for row in game_map.grid] == VALID


def test_read_map_missing_file(tmp_path):
    with pytest.raises(SoLongError) as info:
        read_map(str(tmp_path / "absent.ber"))
    assert info.value.kind is ErrorKind.BAD_INPUT


def test_read_map_wrong_extension(tmp_path):
    path = _write(tmp_path, "\n".join(VALID), name="level.txt")
    with pytest.raises(SoLongError) as info:
        read_map(path)
    assert info.value.kind is ErrorKind.BAD_INPUT


def test_read_map_empty_file(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(SoLongError) as info:
        read_map(path)
    assert info.value.kind is ErrorKind.FORMAT


def test_check_enclosed_open_border():
    with pytest.raises(SoLongError) as info:
        check_enclosed(["1111", "0P01", "1111"])
    assert info.value.kind is ErrorKind.NOT_ENCLOSED


def test_check_enclosed_open_top():
    with pytest.raises(SoLongError) as info:
        check_enclosed(["1101", "1P01", "1111"])
    assert info.value.kind is ErrorKind.NOT_ENCLOSED


def test_find_player_two_players():
    with pytest.raises(SoLongError) as info:
        find_player(["11111", "1PP01", "11111"])
    assert info.value.kind is ErrorKind.PLAYER


def test_find_player_none():
    with pytest.raises(SoLongError) as info:
        find_player(["11111", "10001", "11111"])
    assert info.value.kind is ErrorKind.PLAYER


def test_find_player_position_holds_player():
    x, y = find_player(VALID)
    assert VALID[y][x] == "P"


def test_find_exit_missing():
    with pytest.raises(SoLongError) as info:
        find_exit(["11111", "1PC01", "11111"])
    assert info.value.kind is ErrorKind.PLAYER


def test_count_collectables_requires_one():
    with pytest.raises(SoLongError) as info:
        count_collectables(["11111", "1P0E1", "11111"])
    assert info.value.kind is ErrorKind.GOALS


def test_count_collectables_two_exits():
    with pytest.raises(SoLongError) as info:
        count_collectables(["111111", "1PCEE1", "111111"])
    assert info.value.kind is ErrorKind.GOALS


def test_validate_map_two_exits():
    with pytest.raises(SoLongError) as info:
        validate_map(["111111", "1PCEE1", "111111"])
    assert info.value.kind is ErrorKind.GOALS


def test_validate_map_unreachable_collectable():
    grid = ["111111", "1P1C01", "1E1001", "111111"]
    with pytest.raises(SoLongError) as info:
        validate_map(grid)
    assert info.value.kind is ErrorKind.GOALS


def test_validate_map_collectable_behind_exit():
    grid = ["111111", "1P0EC1", "111111"]
    with pytest.raises(SoLongError) as info:
        validate_map(grid)
    assert info.value.kind is ErrorKind.GOALS


def test_validate_map_exit_behind_obstacle():
    grid = ["111111", "1PCOE1", "111111"]
    with pytest.raises(SoLongError) as info:
        validate_map(grid)
    assert info.value.kind is ErrorKind.GOALS


def test_validate_map_does_not_change_cells():
    game_map = validate_map(VALID)
    assert ["".join(row) for row in game_map.grid] == VALID


def test_flood_fill_marks_reachable_area():
    grid = [list(row) for row in ["11111", "1P0O1", "10101", "11111"]]
    flood_fill(grid, 1, 1, "E")
    assert grid[1][1] == "X"
    assert grid[1][2] == "X"
    assert grid[2][1] == "X"
    assert grid[1][3] == "O"
    assert grid[2][3] == "0"


def test_flood_fill_stops_at_stop_cell():
    grid = [list(row) for row in ["111111", "1P0EC1", "111111"]]
    flood_fill(grid, 1, 1, "E")
    assert grid[1][3] == "E"
    assert grid[1][4] == "C"
    assert goals_reachable(grid, "C") is False


def test_goals_reachable_after_full_fill():
    grid = [list(row) for row in VALID]
    flood_fill(grid, 1, 1, " ")
    assert goals_reachable(grid, "C") is True
    assert goals_reachable(grid, "E") is True


def test_flood_fill_out_of_bounds_start_leaves_grid():
    grid = [list(row) for row in VALID]
    flood_fill(grid, -1, 0, " ")
    assert ["".join(row) for row in grid] == VALID