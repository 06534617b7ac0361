import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import export_wav
import visualize_timing


def test_export_wav_text(tmp_path, capsys):
    output = tmp_path / "sos.wav"
    assert export_wav.main(["SOS", "--output", str(output)]) == 0

    out = capsys.readouterr().out
    assert "Direction: text" in out
    assert "... --- ..." in out
    assert output.read_bytes()[:4] == b"RIFF"


def test_export_wav_morse(tmp_path, capsys):
    output = tmp_path / "sos.wav"
    assert export_wav.main(["... --- ...", "--wpm", "15", "--freq", "700", "--output", str(output)]) == 0

    out = capsys.readouterr().out
    assert "Direction: morse" in out
    assert "Translation: SOS" in out
    assert output.exists()


def test_export_wav_nothing_to_render(tmp_path, capsys):
    output = tmp_path / "empty.wav"
    assert export_wav.main(["€€", "--mode", "text", "--output", str(output)]) == 1
    assert "No Morse content" in capsys.readouterr().out
    assert not output.exists()


def test_visualize_timing(tmp_path):
    output = tmp_path / "plots" / "timing.png"
    assert visualize_timing.main(["CQ DE K", "--output", str(output)]) == 0
    assert output.exists()


def test_visualize_timing_empty(tmp_path):
    output = tmp_path / "timing.png"
    assert visualize_timing.main(["", "--output", str(output)]) == 1
    assert not output.exists()
