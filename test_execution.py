"""Tests for the drawing drivers, coordinate mapping and figures."""
import logging
import sys

import pytest

from conftest import RecordingDriver
from execution import CoordinateMapper, DrawingDriver, LoggerDriver, PlotterDriver
from execution.figures import draw_polyline, draw_rectangle

BOX = {"min_x": 0.0, "max_x": 200.0, "min_y": 0.0, "max_y": 100.0}


@pytest.fixture
def mapper():
    return CoordinateMapper(BOX, canvas_width=400, canvas_height=200)


def test_canvas_origin_maps_to_box_centre(mapper):
    assert mapper.canvas_to_physical(0, 0) == (100.0, 50.0)


def test_canvas_edges_map_to_box_edges(mapper):
    assert mapper.canvas_to_physical(-200, -100) == (0.0, 0.0)
    assert mapper.canvas_to_physical(200, 100) == (200.0, 100.0)


def test_out_of_range_points_are_clamped(mapper):
    assert mapper.canvas_to_physical(1000, -1000) == (200.0, 0.0)


def test_simulated_plotter_tracks_pen_and_position(mapper, caplog):
    caplog.set_level(logging.INFO)
    plotter = PlotterDriver(mapper, simulation=True)

    plotter.set_position(10, 20)
    assert plotter.current_position == (10, 20)
    assert plotter.pen_is_down is False

    plotter.operate_to(-200, 0)
    assert plotter.current_position == (-200, 0)
    assert plotter.pen_is_down is True

    sim_lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("[SIM]")]
    assert sim_lines == [
        "[SIM] MOVE to (10, 20) -> physical (105.0, 60.0) mm",
        "[SIM] DRAW to (-200, 0) -> physical (0.0, 50.0) mm",
    ]


def test_plotter_description(mapper):
    assert str(PlotterDriver(mapper, simulation=True)) == "BrachioGraph plotter (simulation)"


def test_drivers_satisfy_protocol(mapper):
    assert isinstance(PlotterDriver(mapper, simulation=True), DrawingDriver)
    assert isinstance(LoggerDriver(), DrawingDriver)


def test_logger_driver_logs_positions(caplog):
    caplog.set_level(logging.INFO)
    driver = LoggerDriver("panel")
    driver.set_position(1, 2)
    driver.operate_to(3, 4)
    messages = [r.getMessage() for r in caplog.records]
    assert "[panel] move position: (1, 2)" in messages
    assert "[panel] draw position: (3, 4)" in messages
    assert str(driver) == "Logger driver 'panel'"


def test_polyline_moves_then_draws():
    driver = RecordingDriver()
    draw_polyline(driver, [(0, 0), (5, 0), (5, 5)])
    assert driver.calls == [
        ("set_position", 0, 0),
        ("operate_to", 5, 0),
        ("operate_to", 5, 5),
    ]


def test_empty_polyline_does_nothing():
    driver = RecordingDriver()
    draw_polyline(driver, [])
    assert driver.calls == []


def test_rectangle_is_closed():
    driver = RecordingDriver()
    draw_rectangle(driver, 1, 2, 10, 5)
    assert driver.calls[0] == ("set_position", 1, 2)
    assert driver.calls[-1] == ("operate_to", 1, 2)
    assert len(driver.calls) == 5


def test_hardware_mode_without_brachiograph_fails_loudly(mapper, monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setitem(sys.modules, "brachiograph", None)

    with pytest.raises(ImportError):
        PlotterDriver(mapper, simulation=False)

    assert any("BrachioGraph package not available" in r.getMessage() for r in caplog.records)
