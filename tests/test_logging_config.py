from log_config.logger import configure_logging, get_logger, log_performance, logger


def test_file_sinks_are_created(tmp_path) -> None:
    logs_dir = tmp_path / "logs"
    try:
        configure_logging("DEBUG", logs_dir)
        get_logger(__name__).info("flight path logging check")
        assert logs_dir.is_dir()
        assert list(logs_dir.glob("flightpath_*.log"))
        assert list(logs_dir.glob("errors_*.log"))
    finally:
        configure_logging("INFO")


def test_slow_operations_warn() -> None:
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        log_performance("compute_flight_paths", 250.0, threshold_ms=100.0)
        log_performance("compute_flight_paths", 5.0, threshold_ms=100.0)
    finally:
        logger.remove(handler_id)
    assert len(messages) == 1
    assert "Slow operation: compute_flight_paths" in messages[0]
