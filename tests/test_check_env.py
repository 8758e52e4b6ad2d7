import json

import pytest

from affiliate.check_env import check, main


def test_nothing_configured():
    assert check({}) == (["Missing GOOGLE_API_KEY (public API) or GCP_PROJECT (Vertex AI) in .env"], [])


def test_api_key_alone_is_enough():
    assert check({"GOOGLE_API_KEY": "abc"}) == ([], [])
    assert check({"API_KEY": "abc"}) == ([], [])


def test_vertex_with_missing_credentials_file(tmp_path):
    problems, warnings = check({"GCP_PROJECT": "p", "GOOGLE_APPLICATION_CREDENTIALS": str(tmp_path / "nope.json")})
    assert len(problems) == 1 and "not found" in problems[0]
    assert warnings == []


def test_vertex_with_wrong_credentials_type(tmp_path):
    creds = tmp_path / "creds.json"
    creds.write_text(json.dumps({"type": "authorized_user"}), encoding="utf-8")
    assert check({"GCP_PROJECT": "p", "GOOGLE_APPLICATION_CREDENTIALS": str(creds)}) == (
        ["Credentials JSON is not a service_account key"], []
    )


def test_vertex_with_invalid_json(tmp_path):
    creds = tmp_path / "creds.json"
    creds.write_text("{not json", encoding="utf-8")
    problems, _ = check({"GCP_PROJECT": "p", "GOOGLE_APPLICATION_CREDENTIALS": str(creds)})
    assert problems[0].startswith("Credentials file is not valid JSON")


def test_vertex_problem_becomes_warning_with_api_key(tmp_path, capsys):
    env = {"GCP_PROJECT": "p", "GOOGLE_API_KEY": "abc",
           "GOOGLE_APPLICATION_CREDENTIALS": str(tmp_path / "nope.json")}
    problems, warnings = check(env)
    assert problems == []
    assert len(warnings) == 1 and "falling back" in warnings[0]
    assert capsys.readouterr().out == ""


def test_main_prints_warnings_and_passes(mocker, tmp_path, capsys):
    mocker.patch("affiliate.check_env.load_dotenv")
    mocker.patch.dict("os.environ", {"GCP_PROJECT": "p", "GOOGLE_API_KEY": "abc",
                                     "GOOGLE_APPLICATION_CREDENTIALS": str(tmp_path / "nope.json")}, clear=True)
    main()
    out = capsys.readouterr().out
    assert "falling back" in out
    assert "Credentials look usable" in out


def test_main_exits_on_problems(mocker):
    mocker.patch("affiliate.check_env.load_dotenv")
    mocker.patch.dict("os.environ", {}, clear=True)
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 1
