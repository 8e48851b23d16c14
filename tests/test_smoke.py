import io

import fancy_writer
from fancy_writer import FancyWriter
from examples.perf_profile import build_config


def test_public_api() -> None:
    assert fancy_writer.__version__ == "1.0.1"
    for name in fancy_writer.__all__:
        assert hasattr(fancy_writer, name), name


def test_example_config_roundtrip() -> None:
    out = io.StringIO()
    w = build_config(out)
    assert isinstance(w, FancyWriter)
    assert out.getvalue() == (
        "# Generated by perf_profile.py\n"
        "LoadModule mime_module modules/mod_mime.so\n"
        "<IfModule mime_module>\n"
        "  TypesConfig conf/mime.types\n"
        "  AddType application/x-gzip .tgz\n"
        "</IfModule>\n"
    )
    assert w.prefix_stack == ()
