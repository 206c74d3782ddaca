from tempy_email.logger import get_logger


def test_get_logger_reuses_existing_logger():
    logger = get_logger("TestLogger")
    handler_count = len(logger.handlers)

    same_logger = get_logger("TestLogger")
    assert logger is same_logger
    assert len(same_logger.handlers) == handler_count


def test_default_name_and_module_hierarchy():
    assert get_logger().name == "tempy_email"
    assert get_logger("tempy_email.polling").parent is get_logger()
