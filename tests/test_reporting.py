"""
Tests for error reporting

오류 로깅 및 태그 집계 테스트
"""

import pytest


class TestLogError:
    """log_error 테스트"""

    def test_logs_terse_message_with_tags(self, log_records):
        """간략 메시지와 태그 기록"""
        from errs import Tag
        from errs.reporting import log_error

        err = Tag("outer").wrap(Tag("inner").wrap(ValueError("t")))
        text = log_error(err, detailed=False)

        assert text == "outer: inner: t"
        assert len(log_records) == 1
        record = log_records[0]
        assert record["message"] == "outer: inner: t"
        assert record["level"].name == "ERROR"
        assert record["extra"]["error_tags"] == ["outer", "inner"]

    def test_record_points_to_caller(self, log_records):
        """로그 위치는 호출한 함수"""
        from errs import wrapf
        from errs.reporting import log_error

        log_error(wrapf("t"), detailed=False)

        assert log_records[0]["function"] == "test_record_points_to_caller"

    def test_detailed(self, log_records):
        """상세 출력에는 스택 포함"""
        from errs import Tag
        from errs.reporting import log_error

        err = Tag("foo").wrapf("t")
        text = log_error(err, level="WARNING", detailed=True)

        assert text == err.detailed()
        assert "\n\t" in log_records[0]["message"]
        assert log_records[0]["level"].name == "WARNING"

    def test_detailed_default_follows_debug(self, log_records, monkeypatch):
        """detailed 기본값은 config.DEBUG"""
        from errs import wrapf
        from errs.config import config
        from errs.reporting import log_error

        err = wrapf("t")

        monkeypatch.setattr(config, "DEBUG", False)
        assert log_error(err) == "t"

        monkeypatch.setattr(config, "DEBUG", True)
        assert log_error(err) == err.detailed()

    def test_none(self, log_records):
        """None은 기록하지 않음"""
        from errs.reporting import log_error

        assert log_error(None) is None
        assert log_records == []

    def test_foreign_error(self, log_records):
        """외부 오류는 태그 없이 기록"""
        from errs.reporting import log_error

        assert log_error(KeyError("k"), detailed=True) == "'k'"
        assert log_records[0]["extra"]["error_tags"] == []

    def test_braces_in_message(self, log_records):
        """메시지의 중괄호는 그대로 기록"""
        from errs import wrapf
        from errs.reporting import log_error

        log_error(wrapf("bad value {x}"), detailed=False)

        assert log_records[0]["message"] == "bad value {x}"


class TestTagCounts:
    """tag_counts 테스트"""

    def test_counts(self):
        """태그별 오류 수"""
        from errs import Tag, combine
        from errs.reporting import tag_counts

        foo, bar, baz = Tag("foo"), Tag("bar"), Tag("baz")
        errors = [
            foo.wrap(bar.wrap(ValueError("a"))),
            foo.wrapf("b"),
            None,
            KeyError("k"),
            combine(bar.wrapf("c"), baz.wrapf("d")),
        ]

        assert tag_counts(errors) == {"foo": 2, "bar": 2, "baz": 1}

    def test_counts_tagged_group(self):
        """태그로 래핑된 그룹도 내부 오류까지 집계"""
        from errs import Tag, combine
        from errs.reporting import tag_counts

        err = Tag("batch").wrap(combine(Tag("a").wrapf("x"), Tag("a").wrapf("y")))

        assert tag_counts([err]) == {"batch": 1, "a": 2}

    def test_repeated_tag_counted_once(self):
        """한 오류 체인에 같은 태그가 여러 번 있어도 한 번만 집계"""
        from errs import Tag, tags
        from errs.reporting import tag_counts

        t1, t2 = Tag("t1"), Tag("t2")
        err = t1.wrap(t2.wrap(t1.wrap(ValueError("e"))))

        assert tags(err) == [t1, t2, t1]
        assert tag_counts([err]) == {"t1": 1, "t2": 1}
        assert tag_counts([err, t1.wrapf("x")]) == {"t1": 2, "t2": 1}

    def test_empty(self):
        """빈 입력"""
        from errs.reporting import tag_counts

        assert tag_counts([]) == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
