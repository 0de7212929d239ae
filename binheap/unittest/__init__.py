from .speed import speed_test, speed_tests_on, within_budget

#
__all__ = ["speed_test", "speed_tests_on", "within_budget"]
