import json

from mapview_core import cli

LAYOUT = """<FrameLayout xmlns:app="http://schemas.android.com/apk/res-auto">
    <com.mapbox.mapboxsdk.maps.MapView
        app:camera_latitude="51.5"
        app:camera_longitude="-0.125"
        app:logo_enabled="false"
        app:compass_margin_top="5dp" />
</FrameLayout>
"""


def test_cli_without_command_prints_help(capsys):
    assert cli.main([]) == 2
    captured = capsys.readouterr()
    assert "Map view options tools" in (captured.out + captured.err)


def test_cli_import_then_inspect(tmp_path, capsys):
    layout = tmp_path / "activity_map.xml"
    layout.write_text(LAYOUT, encoding="utf-8")
    record = tmp_path / "out" / "options.bin"

    assert cli.main(["import", str(layout), "--density", "2", "--out", str(record), "--versioned"]) == 0
    assert record.exists()
    capsys.readouterr()

    assert cli.main(["inspect", str(record), "--versioned"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["logo_enabled"] is False
    assert payload["compass_margins"] == [20, 10, 20, 20]
    assert payload["camera"]["target"] == {"latitude": 51.5, "longitude": -0.125}
    assert payload["my_location_foreground_drawable"] is None
    assert len(payload["fingerprint"]) == 64


def test_cli_reports_codec_errors(tmp_path, capsys):
    record = tmp_path / "broken.bin"
    record.write_bytes(b"\x01\x02")
    assert cli.main(["inspect", str(record)]) == 1
    assert "error:" in capsys.readouterr().out
