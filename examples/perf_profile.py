"""Simple profiling of line writes, nested scopes and template dispatch."""

from __future__ import annotations

import io
import timeit
import tracemalloc

from fancy_writer import FancyWriter


def _nest(w: FancyWriter, depth: int) -> None:
    if depth == 0:
        w.write("leaf")
        return
    w.indent(2, lambda w: _nest(w, depth - 1))


def build_config(out: io.StringIO) -> FancyWriter:
    w = FancyWriter(out, enum_separator=" ")
    w.add_line_config("load_module", "LoadModule %module modules/%file.so")
    w.add_block_config("if_module", "<IfModule %module>", "</IfModule>")
    with w.comment():
        w.write("Generated by perf_profile.py")
    w.call("load_module", module="mime_module", file="mod_mime")
    with w.call("if_module", module="mime_module"):
        w.write("TypesConfig conf/mime.types")
        w.write_enum(["AddType", "application/x-gzip", ".tgz"])
    return w


def main() -> None:
    out = io.StringIO()
    w = FancyWriter(out)

    duration: float = timeit.timeit(lambda: w.write("line"), number=10000)
    print(f"write(): {duration:.4f}s/10000")

    nested: float = timeit.timeit(lambda: _nest(w, 20), number=100)
    print(f"20 nested indents: {nested:.4f}s/100")

    dispatch: float = timeit.timeit(lambda: build_config(io.StringIO()), number=1000)
    print(f"Template dispatch config: {dispatch:.4f}s/1000")

    tracemalloc.start()
    _nest(FancyWriter(io.StringIO()), 100)
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Nested scope memory: current={current} bytes peak={peak} bytes")

    sample = io.StringIO()
    build_config(sample)
    print(sample.getvalue(), end="")


if __name__ == "__main__":
    main()
