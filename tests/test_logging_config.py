import io
import logging

from leader_slot_checker.logging_config import setup_logging


def test_setup_logging_writes_file_and_console(tmp_path):
    console = io.StringIO()
    logger = setup_logging("unit_test", log_dir=str(tmp_path), console_stream=console)

    logging.getLogger("leader_slot_checker.checker").info("info only goes to the file")
    logging.getLogger("leader_slot_checker.checker").warning("warnings reach the console")

    log_files = list(tmp_path.glob("unit_test_log_*.log"))
    assert len(log_files) == 1
    for handler in logger.handlers:
        handler.flush()
    contents = log_files[0].read_text()
    assert "INFO - info only goes to the file" in contents
    assert "WARNING - warnings reach the console" in contents

    output = console.getvalue()
    assert "info only goes to the file" not in output
    assert "[WARNING] [PY:unit_test]" in output
    assert "\033[" not in output


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging("unit_test", log_dir=str(tmp_path), console_stream=io.StringIO())
    logger = setup_logging("unit_test", log_dir=str(tmp_path), console_stream=io.StringIO())
    assert len(logger.handlers) == 2
