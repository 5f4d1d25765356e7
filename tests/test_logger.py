"""
Unit tests for the trace loggers.
"""

import io
import json

from graphtrees.logger import NoopLogger, StdLogger


def test_text_lines_and_level_filter():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("spt.extract", vertex=1, dist=0)
    log.info("spt.done", source=1, tree_edges=3)
    log.warning("mst.partial")
    assert buf.getvalue().splitlines() == [
        "info spt.done source=1 tree_edges=3",
        "warning mst.partial",
    ]


def test_fields_may_share_parameter_names():
    buf = io.StringIO()
    log = StdLogger(level="debug", stream=buf)
    log.debug("custom", level=2, event="x")
    log.log("info", "custom", level=3)
    assert buf.getvalue().splitlines() == [
        "debug custom level=2 event=x",
        "info custom level=3",
    ]


def test_disabled_level_with_colliding_field_is_silent():
    buf = io.StringIO()
    StdLogger(level="warning", stream=buf).debug("custom", level=1)
    assert buf.getvalue() == ""


def test_json_lines():
    buf = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=buf).debug(
        "bfs.level", depth=1, queue=[1]
    )
    obj = json.loads(buf.getvalue())
    assert obj == {"level": "debug", "event": "bfs.level", "depth": 1, "queue": [1]}


def test_json_falls_back_to_str():
    buf = io.StringIO()
    StdLogger(level="info", json_fmt=True, stream=buf).info("run", backend={"csr"})
    assert json.loads(buf.getvalue())["backend"] == "{'csr'}"


def test_noop_logger_accepts_any_fields():
    log = NoopLogger()
    log.debug("x", level=1)
    log.info("x", event=2)
    log.warning("x")
