import logging

import huffman_cli


def test_compress_then_decompress_default_paths(tmp_path):
	src = tmp_path / "notes.txt"
	src.write_bytes(b"to be compressed, to be restored\n" * 30)

	assert huffman_cli.main(["compress", str(src)]) == 0
	artifact = tmp_path / "notes.txt.huff"
	assert artifact.exists()

	restored = tmp_path / "restored.txt"
	assert huffman_cli.main(["decompress", str(artifact), "-o", str(restored)]) == 0
	assert restored.read_bytes() == src.read_bytes()


def test_decompress_strips_suffix(tmp_path):
	src = tmp_path / "data.bin"
	src.write_bytes(bytes(range(256)))
	artifact = tmp_path / "packed.huff"
	assert huffman_cli.main(["compress", str(src), "-o", str(artifact)]) == 0
	assert huffman_cli.main(["decompress", str(artifact)]) == 0
	assert (tmp_path / "packed").read_bytes() == src.read_bytes()


def test_roundtrip_command(tmp_path):
	src = tmp_path / "file.txt"
	src.write_bytes(b"roundtrip me")
	assert huffman_cli.main(["roundtrip", str(src)]) == 0


def test_missing_source_fails(tmp_path, caplog):
	with caplog.at_level(logging.ERROR):
		code = huffman_cli.main(["compress", str(tmp_path / "absent.bin")])
	assert code == 1
	assert "compress failed" in caplog.text


def test_corrupt_artifact_fails(tmp_path):
	bad = tmp_path / "bad.huff"
	bad.write_bytes(b"garbage")
	assert huffman_cli.main(["decompress", str(bad)]) == 1
	assert not (tmp_path / "bad").exists()


def test_config_suffix_is_used(tmp_path):
	config = tmp_path / "huffpack.yaml"
	config.write_text("artifact_suffix: .hp\n")
	src = tmp_path / "in.txt"
	src.write_bytes(b"configured")
	assert huffman_cli.main(["--config", str(config), "compress", str(src)]) == 0
	assert (tmp_path / "in.txt.hp").exists()


def test_bad_config_fails(tmp_path, capsys):
	config = tmp_path / "huffpack.yaml"
	config.write_text("compression_level: 9\n")
	src = tmp_path / "in.txt"
	src.write_bytes(b"x")
	assert huffman_cli.main(["--config", str(config), "compress", str(src)]) == 1
	assert "bad config" in capsys.readouterr().err


def test_malformed_yaml_config_fails(tmp_path, capsys):
	config = tmp_path / "huffpack.yaml"
	config.write_text("log_level: [unclosed\n")
	src = tmp_path / "in.txt"
	src.write_bytes(b"x")
	assert huffman_cli.main(["--config", str(config), "compress", str(src)]) == 1
	assert "bad config" in capsys.readouterr().err


def test_missing_config_file_fails(tmp_path, capsys):
	src = tmp_path / "in.txt"
	src.write_bytes(b"x")
	assert huffman_cli.main(["--config", str(tmp_path / "absent.yaml"), "compress", str(src)]) == 1
	assert "bad config" in capsys.readouterr().err


def test_numeric_log_level_config(tmp_path):
	config = tmp_path / "huffpack.yaml"
	config.write_text("log_level: 10\n")
	src = tmp_path / "in.txt"
	src.write_bytes(b"numeric level")
	assert huffman_cli.main(["--config", str(config), "compress", str(src)]) == 0
	assert (tmp_path / "in.txt.huff").exists()
