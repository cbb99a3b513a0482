import json

from shamir_recover import audit


def test_record_event_creates_signed_chain(tmp_path):
    first_path = audit.record_event("first", details={"value": 1}, directory=tmp_path)
    second_path = audit.record_event("second", details={"value": 2}, directory=tmp_path)

    assert first_path.exists()
    assert second_path.exists()
    assert first_path != second_path

    for path in (first_path, second_path):
        assert audit.verify_log(path)

    first_data = json.loads(first_path.read_text())
    second_data = json.loads(second_path.read_text())
    assert first_data["payload"]["prev_hash"] == audit.GENESIS
    assert second_data["payload"]["prev_hash"] == first_data["chain_hash"]
    assert (tmp_path / "chain.state").read_text().strip() == second_data["chain_hash"]


def test_tampered_entry_fails_verification(tmp_path):
    path = audit.record_event("reconstruct.success", details={"k": 3}, directory=tmp_path)
    data = json.loads(path.read_text())
    data["payload"]["details"]["k"] = 2
    path.write_text(json.dumps(data))

    assert not audit.verify_log(path)


def test_custom_directory_is_created(tmp_path):
    target = tmp_path / "nested" / "audit"
    log_path = audit.record_event("test", directory=target)
    assert log_path.parent == target
    assert (target / audit.KEY_FILENAME).exists()
