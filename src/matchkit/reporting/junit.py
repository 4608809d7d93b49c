from __future__ import annotations

from pathlib import Path
from typing import Iterable

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from matchkit.assertions import ExpectationRecord


def build_suite(records: Iterable[ExpectationRecord], suite_name: str = "matchkit") -> TestSuite:
    suite = TestSuite(suite_name)
    for record in records:
        case = TestCase(record.label)
        case.classname = suite_name
        if not record.passed:
            failure = Failure(record.result.reason)
            failure.text = record.result.reason
            case.result = [failure]
        suite.add_testcase(case)
    return suite


def write_junit(path: Path, records: Iterable[ExpectationRecord], suite_name: str = "matchkit") -> Path:
    """Write junit.xml with one test case per expectation record, return path."""
    xml = JUnitXml()
    xml.append(build_suite(records, suite_name))
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
