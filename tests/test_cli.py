import base64

from imagegen.app.cli import main
from imagegen.png import PNG_SIGNATURE


class TestCli:
    def test_writes_image(self, tmp_path, capsys):
        target = tmp_path / "out" / "red.png"
        assert main(["16", "9", "#f00", str(target)]) == 0
        out = capsys.readouterr().out
        assert "Successfully generated and saved test image: 16x9 pixels with color #f00" in out
        assert target.read_bytes()[:8] == PNG_SIGNATURE

    def test_base64_output(self, capsys):
        assert main(["2", "2", "#00ff00", "--base64"]) == 0
        data = base64.b64decode(capsys.readouterr().out.strip())
        assert data[:8] == PNG_SIGNATURE

    def test_missing_filepath(self, capsys):
        assert main(["2", "2", "#00ff00"]) == 2
        assert "Missing file path" in capsys.readouterr().err

    def test_invalid_dimensions(self, tmp_path, capsys):
        assert main(["0", "2", "#000", str(tmp_path / "x.png")]) == 2
        assert "width and height must be integers between 1 and 4096" in capsys.readouterr().err

    def test_invalid_color(self, tmp_path, capsys):
        assert main(["2", "2", "blue", str(tmp_path / "x.png")]) == 2
        assert "Invalid color: blue" in capsys.readouterr().err

    def test_no_overwrite(self, tmp_path, capsys):
        target = tmp_path / "x.png"
        target.write_bytes(b"keep")
        assert main(["2", "2", "#000", str(target), "--no-overwrite"]) == 2
        assert target.read_bytes() == b"keep"

    def test_verify_flag(self, tmp_path, capsys):
        assert main(["7", "5", "#abcdef", str(tmp_path / "v.png"), "--verify", "--verbose"]) == 0
