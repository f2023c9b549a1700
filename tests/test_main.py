import json
from pathlib import Path

import pytest

import main
from main import ScanConfig, run_scan
from pricing.reserves import StaticReserveProvider

EXAMPLES = Path(__file__).resolve().parents[1] / "docs" / "examples"
PAIRS = str(EXAMPLES / "pairs.csv")
RESERVES = str(EXAMPLES / "reserves.json")


def _config(**overrides) -> ScanConfig:
    values = {
        "pools_csv": PAIRS,
        "start_token": "WBNB",
        "amount_in": 10**18,
        "max_hops": 4,
        "reserves_json": RESERVES,
        "show_all": True,
    }
    values.update(overrides)
    return ScanConfig(**values)


def test_run_scan_from_snapshot():
    text = run_scan(_config())
    assert "Route 1: WBNB -> BUSD -> WBNB" in text
    assert "Route 2: WBNB -> CAKE -> BUSD -> WBNB" in text


def test_run_scan_with_explicit_provider():
    provider = StaticReserveProvider({})
    text = run_scan(_config(reserves_json=None), provider=provider)
    assert text == "No arbitrage routes found ending with WBNB."


def test_main_json_output(capsys):
    main.main(
        [
            "--pools",
            PAIRS,
            "--reserves",
            RESERVES,
            "--start",
            "WBNB",
            "--amount",
            "1",
            "--max-hops",
            "4",
            "--json",
        ]
    )
    payload = json.loads(capsys.readouterr().out)
    assert [route["path"] for route in payload["routes"]] == [
        ["WBNB", "BUSD", "WBNB"],
        ["WBNB", "CAKE", "BUSD", "WBNB"],
    ]
    assert all(route["amount_in"] == str(10**18) for route in payload["routes"])


def test_main_reports_load_failure(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--pools", str(tmp_path / "missing.csv"), "--reserves", RESERVES])
    assert exc.value.code == 2
    assert "Pool file not found" in capsys.readouterr().err


def test_main_rejects_short_max_hops(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--pools", PAIRS, "--reserves", RESERVES, "--max-hops", "1"])
    assert exc.value.code == 2
    assert "--max-hops" in capsys.readouterr().err


def test_scan_config_scales_amount():
    args = main._build_parser().parse_args(
        ["--amount", "1.5", "--decimals", "6", "--rpc-url", "https://rpc.example"]
    )
    config = ScanConfig.from_args(args)
    assert config.amount_in == 1_500_000
    assert config.rpc_urls == ["https://rpc.example"]


def test_main_rejects_infinite_amount(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--pools", PAIRS, "--reserves", RESERVES, "--amount", "Infinity"])
    assert exc.value.code == 2
    assert "Invalid amount" in capsys.readouterr().err
