"""Tests for the Playwright capability probe"""

import playwright

from form_scraper.probe import inspect_capability


class FakePage:
    timeout = 30

    def wait_for_timeout(self, ms):
        pass


def test_method_present():
    report = inspect_capability(FakePage(), "wait_for_timeout")
    assert report.present is True
    assert report.kind == "method"
    assert report.module_path == playwright.__file__


def test_non_callable_attribute():
    report = inspect_capability(FakePage(), "timeout")
    assert report.present is True
    assert report.kind == "int"


def test_missing_capability():
    report = inspect_capability(FakePage(), "waitForTimeout")
    assert report.present is False
    assert report.kind == "undefined"
