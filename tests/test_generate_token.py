from auth import validateToken
from config import getSettings
from generate_token import main


def test_prints_valid_token(monkeypatch, capsys):
    monkeypatch.setenv("RECEIPT_JWT_SECRET", "cli-secret-for-receipt-processor-tokens")
    getSettings.cache_clear()
    try:
        assert main(["--subject", "saurabh", "--ttl", "120"]) == 0
    finally:
        getSettings.cache_clear()

    output = capsys.readouterr().out.strip()
    assert output.startswith("Generated JWT Token: ")
    assert validateToken(output.split(": ", 1)[1], "cli-secret-for-receipt-processor-tokens")


def test_requires_secret(monkeypatch, capsys):
    monkeypatch.setenv("RECEIPT_JWT_SECRET", "")
    getSettings.cache_clear()
    try:
        assert main([]) == 1
    finally:
        getSettings.cache_clear()
    assert "RECEIPT_JWT_SECRET required" in capsys.readouterr().err
