from nsnake.savegame import SaveGame


def test_defaults_without_file(tmp_path):
    game = SaveGame(tmp_path / "checkpoint.sav")
    assert (game.speed, game.score, game.food, game.level) == (150, 0, 5, 1)


def test_load_missing_returns_false(tmp_path):
    game = SaveGame(tmp_path / "checkpoint.sav")
    assert game.load() is False


def test_save_format(tmp_path):
    path = tmp_path / "checkpoint.sav"
    SaveGame(path).save()
    assert path.read_text() == "150\t0\t5\t1"


def test_round_trip(tmp_path):
    path = tmp_path / "checkpoint.sav"
    game = SaveGame(path)
    game.next_level()
    game.next_level()
    game.save()
    restored = SaveGame(path)
    assert (restored.speed, restored.score, restored.food, restored.level) == (
        game.speed,
        game.score,
        game.food,
        game.level,
    )
    assert restored.load() is True


def test_next_level_relations(tmp_path):
    game = SaveGame(tmp_path / "checkpoint.sav")
    before = (game.speed, game.score, game.food, game.level)
    game.next_level()
    assert game.score == before[1] + before[2]
    assert game.speed < before[0]
    assert game.food > before[2]
    assert game.level == before[3] + 1


def test_speed_floor(tmp_path):
    game = SaveGame(tmp_path / "checkpoint.sav")
    game.speed = 2
    game.next_level()
    assert game.speed == 2


def test_food_cap(tmp_path):
    game = SaveGame(tmp_path / "checkpoint.sav")
    game.food = 250
    game.next_level()
    assert game.food == 250


def test_load_truncates_byte_fields(tmp_path):
    path = tmp_path / "checkpoint.sav"
    path.write_text("100\t20\t300\t7")
    game = SaveGame(path)
    assert game.speed == 100
    assert game.score == 20
    assert game.food == 44
    assert game.level == 7


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "checkpoint.sav"
    path.write_text("90\tbroken")
    game = SaveGame(path)
    assert game.speed == 90
    assert (game.score, game.food, game.level) == (0, 5, 1)


def test_delete(tmp_path):
    path = tmp_path / "checkpoint.sav"
    game = SaveGame(path)
    game.save()
    assert path.exists()
    game.delete()
    assert not path.exists()
    game.delete()
    assert game.load() is False