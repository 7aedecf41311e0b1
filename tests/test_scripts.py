import runpy
from pathlib import Path

import check
from srpconfig.common.protocol import ParamsMessage
from srpconfig.common.utils import b64encode
from srpconfig.storage.params import load_params, save_params

ROOT = Path(__file__).resolve().parent.parent


def test_gen_params_then_check(tmp_path):
    main = runpy.run_path(str(ROOT / "scripts" / "gen_params.py"), run_name="gen_params")["main"]
    out = str(tmp_path / "params.json")
    assert main(["--group", "rfc3526-2048", "--digest", "sha1", "--out", out]) == out
    msg = load_params(out)
    assert msg.digest == "sha1"
    assert check.verify(out)


def test_check_rejects_short_modulus(tmp_path):
    path = str(tmp_path / "weak.json")
    save_params(ParamsMessage(N=b64encode((2**199 + 1).to_bytes(25, "big")), g=b64encode(b"\x02")), path)
    assert not check.verify(path)


def test_check_rejects_bad_generator(tmp_path, config):
    path = str(tmp_path / "bad_g.json")
    msg = ParamsMessage.from_configuration(config).model_copy(update={"g": b64encode(b"\x01")})
    save_params(msg, path)
    assert not check.verify(path)


def test_check_rejects_unknown_digest(tmp_path, config):
    path = str(tmp_path / "md5.json")
    save_params(ParamsMessage.from_configuration(config, "md5"), path)
    assert not check.verify(path)


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_check_rejects_missing_field(tmp_path):
    path = write(tmp_path / "no_n.json", '{"type": "srp_params", "g": "Ag=="}')
    assert not check.verify(path)


def test_check_rejects_bad_base64(tmp_path):
    path = write(tmp_path / "bad_b64.json", '{"type": "srp_params", "N": "!!!notb64", "g": "Ag=="}')
    assert not check.verify(path)


def test_check_rejects_invalid_json_and_missing_file(tmp_path):
    assert not check.verify(write(tmp_path / "broken.json", "{not json"))
    assert not check.verify(str(tmp_path / "absent.json"))


def test_check_keeps_going_after_bad_file(tmp_path, config):
    good = str(tmp_path / "good.json")
    save_params(ParamsMessage.from_configuration(config), good)
    bad = write(tmp_path / "bad.json", '{"type": "srp_params"}')
    assert [check.verify(p) for p in (bad, good)] == [False, True]
