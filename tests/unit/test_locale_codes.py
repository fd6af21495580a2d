import pytest

from utils.locale_codes import (
    HOST_TO_PROVIDER,
    PROVIDER_TO_HOST,
    from_provider_code,
    is_auto,
    to_provider_code,
)


class TestToProviderCode:
    @pytest.mark.parametrize(
        "host_code, expected",
        [
            ("zh_TW", "zh-TW"),
            ("zh_HK", "zh-TW"),
            ("zh_MO", "zh-TW"),
            ("zh_CN", "zh"),
            ("zh_SG", "zh"),
            ("en_US", "en"),
            ("en_GB", "en"),
            ("pt_BR", "pt"),
            ("de_CH", "de"),
            ("ko_KR", "ko"),
            ("ur", "ur"),
        ],
    )
    def test_mapped_codes(self, host_code, expected):
        assert to_provider_code(host_code) == expected

    @pytest.mark.parametrize("code", ["xx_YY", "zh-TW", "auto", "", "EN_us"])
    def test_unmapped_codes_pass_through(self, code):
        assert to_provider_code(code) == code


class TestFromProviderCode:
    @pytest.mark.parametrize(
        "provider_code, expected",
        [
            ("zh", "zh_CN"),
            ("zh-Hans", "zh_CN"),
            ("zh-Hant", "zh_TW"),
            ("zh-TW", "zh_TW"),
            ("zh-HK", "zh_HK"),
            ("en", "en"),
            ("en-GB", "en_GB"),
            ("pt-BR", "pt_BR"),
            ("fa", "fa"),
        ],
    )
    def test_mapped_codes(self, provider_code, expected):
        assert from_provider_code(provider_code) == expected

    @pytest.mark.parametrize(
        "provider_code, expected",
        [
            ("xx-YY", "xx"),
            ("zh-Latn", "zh_CN"),
            ("zh_XX", "zh_CN"),
            ("eo", "eo"),
            ("gle", "gl"),
            ("x", "x"),
            ("", ""),
        ],
    )
    def test_fallback(self, provider_code, expected):
        assert from_provider_code(provider_code) == expected


class TestAsymmetry:
    def test_zh_cn_round_trips_through_default(self):
        assert from_provider_code(to_provider_code("zh_CN")) == "zh_CN"

    def test_regional_variants_do_not_round_trip(self):
        assert from_provider_code(to_provider_code("zh_HK")) == "zh_TW"
        assert from_provider_code(to_provider_code("zh_SG")) == "zh_CN"
        assert from_provider_code(to_provider_code("en_US")) == "en"

    def test_reverse_only_entries(self):
        assert "zh-Hant" not in HOST_TO_PROVIDER
        assert "zh-Hans" not in HOST_TO_PROVIDER
        assert PROVIDER_TO_HOST["zh"] == "zh_CN"
        assert HOST_TO_PROVIDER["zh"] == "zh"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            HOST_TO_PROVIDER["xx"] = "xx"
        with pytest.raises(TypeError):
            PROVIDER_TO_HOST["xx"] = "xx"


def test_is_auto():
    assert is_auto("auto")
    assert is_auto("AUTO")
    assert not is_auto("en")
    assert not is_auto("")
    assert not is_auto(None)
