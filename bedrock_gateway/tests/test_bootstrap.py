import pytest
from unittest.mock import patch
from bedrock_gateway import __main__ as bootstrap

AWS_VARS = ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_REGION", "PORT")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in AWS_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_missing_credentials_exit(monkeypatch):
    with patch("bedrock_gateway.__main__.uvicorn.run") as run:
        with pytest.raises(SystemExit) as exc_info:
            bootstrap.main()

    assert exc_info.value.code == 1
    run.assert_not_called()


def test_serves_on_configured_port(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("PORT", "8123")

    with patch("bedrock_gateway.__main__.uvicorn.run") as run:
        bootstrap.main()

    run.assert_called_once()
    app = run.call_args.args[0]
    assert run.call_args.kwargs["port"] == 8123
    assert app.state.inference_client is not None


def test_default_port(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")

    with patch("bedrock_gateway.__main__.uvicorn.run") as run:
        bootstrap.main()

    assert run.call_args.kwargs["port"] == 3000


def test_invalid_port_exits_cleanly(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("PORT", "abc")

    with patch("bedrock_gateway.__main__.uvicorn.run") as run:
        with pytest.raises(SystemExit) as exc_info:
            bootstrap.main()

    assert exc_info.value.code == 1
    run.assert_not_called()
