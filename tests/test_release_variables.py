"""Tests for the release variable table used by asset name patterns."""

from datetime import datetime, timedelta, timezone

import pytest

from release_upload.event import ReleaseEvent
from release_upload.variables import build_release_variables, format_pattern, normalize_tag


def make_release(tag='v2.0.0', commitish='main', name='Version 2'):
    return ReleaseEvent(
        upload_url='https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}',
        tag_name=tag,
        target_commitish=commitish,
        name=name,
    )


class TestNormalizeTag:

    def test_leading_v_is_stripped(self):
        assert normalize_tag('v2.0.0') == '2.0.0'

    def test_tag_without_v_is_unchanged(self):
        assert normalize_tag('2.0.0') == '2.0.0'

    def test_only_one_v_is_stripped(self):
        assert normalize_tag('vv1') == 'v1'

    def test_uppercase_v_is_kept(self):
        assert normalize_tag('V1.0') == 'V1.0'


class TestBuildReleaseVariables:

    def test_release_fields(self):
        variables = build_release_variables(
            make_release(), now=datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
        )

        assert variables['TAG_RAW'] == 'v2.0.0'
        assert variables['TAG'] == '2.0.0'
        assert variables['COMMITISH'] == 'main'
        assert variables['RELEASE_NAME'] == 'Version 2'

    def test_tag_without_v_equals_raw(self):
        variables = build_release_variables(make_release(tag='2.0.0'))
        assert variables['TAG'] == variables['TAG_RAW'] == '2.0.0'

    def test_date_is_zero_padded(self):
        variables = build_release_variables(
            make_release(), now=datetime(2024, 3, 5, tzinfo=timezone.utc)
        )
        assert (variables['YEAR'], variables['MONTH'], variables['DAY']) == ('2024', '03', '05')

    def test_date_is_converted_to_utc(self):
        local = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=5)))
        variables = build_release_variables(make_release(), now=local)
        assert (variables['YEAR'], variables['MONTH'], variables['DAY']) == ('2023', '12', '31')

    def test_default_date_is_today_utc(self):
        before = datetime.now(timezone.utc)
        variables = build_release_variables(make_release())
        after = datetime.now(timezone.utc)
        assert variables['YEAR'] in {str(before.year), str(after.year)}
        assert len(variables['MONTH']) == 2
        assert len(variables['DAY']) == 2

    def test_missing_release_name_is_empty(self):
        variables = build_release_variables(make_release(name=''))
        assert variables['RELEASE_NAME'] == ''

    def test_release_variables_override_base(self):
        base = {'TAG': 'from-env', 'GITHUB_RUN_NUMBER': '17'}
        variables = build_release_variables(make_release(), base=base)

        assert variables['TAG'] == '2.0.0'
        assert variables['GITHUB_RUN_NUMBER'] == '17'
        # base mapping itself is untouched
        assert base['TAG'] == 'from-env'

    def test_table_is_read_only(self):
        variables = build_release_variables(make_release())
        with pytest.raises(TypeError):
            variables['TAG'] = 'changed'

    def test_pattern_with_release_variables(self):
        variables = build_release_variables(
            make_release(commitish='0123456789abcdef'),
            now=datetime(2024, 11, 9, tzinfo=timezone.utc)
        )
        name = format_pattern('app-${TAG}-${COMMITISH::7}-${YEAR}${MONTH}${DAY}.zip', variables)
        assert name == 'app-2.0.0-0123456-20241109.zip'
