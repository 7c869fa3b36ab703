from daily_quiz.client.local_store import CURRENT_USER_KEY, LocalStore


def test_round_trip_and_clear(tmp_path):
    store = LocalStore(tmp_path / "nested" / "state.json")
    assert store.load_user() is None

    store.save_user({"id": "abc", "name": "alice"})
    assert store.load_user() == {"id": "abc", "name": "alice"}
    assert CURRENT_USER_KEY in store.path.read_text(encoding="utf-8")

    store.clear_user()
    assert store.load_user() is None


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    assert LocalStore(path).load_user() is None
