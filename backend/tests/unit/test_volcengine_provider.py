"""
火山引擎方舟提供商与模型注册单元测试
"""

import pytest

from volc_imggen.core.config import settings
from volc_imggen.core.imggen import (
    ImageModelFactory,
    LoadAPIKeyError,
    ProviderNotFoundError,
    VolcengineImageModel,
    VolcengineProvider,
    create_volcengine,
    register_all_providers,
    register_provider,
)
from volc_imggen.core.imggen.providers import VOLCENGINE_IMAGE_MODEL_IDS
from tests.utils import build_image_payload


@pytest.mark.unit
@pytest.mark.provider
class TestCreateVolcengine:
    """create_volcengine 测试类"""

    def test_default_base_url(self):
        provider = create_volcengine(api_key="k")
        assert provider.base_url == settings.volcengine_base_url

    def test_trailing_slash_is_removed(self):
        provider = create_volcengine(api_key="k", base_url="https://proxy.local/v3/")
        assert provider.base_url == "https://proxy.local/v3"

    def test_image_model_aliases(self):
        provider = create_volcengine(api_key="k")
        for model in (
            provider.image_model("doubao-seedream-4-0-250828"),
            provider.image("doubao-seedream-4-0-250828"),
            provider("doubao-seedream-4-0-250828"),
        ):
            assert isinstance(model, VolcengineImageModel)
            assert model.provider == "volcengine.image"
            assert model.model_id == "doubao-seedream-4-0-250828"

    def test_known_model_ids(self):
        assert VOLCENGINE_IMAGE_MODEL_IDS == [
            "doubao-seedream-4-5-251128",
            "doubao-seedream-4-0-250828",
        ]

    @pytest.mark.asyncio
    async def test_authorization_and_custom_headers(self, transport_builder):
        provider = create_volcengine(
            api_key="secret",
            base_url="https://proxy.local/v3/",
            headers={"X-Team": "pptist"},
            transport=transport_builder.json_response(build_image_payload()),
        )

        await provider.image_model("doubao-seedream-4-5-251128").generate_image("p")

        request = transport_builder.last_request
        assert str(request.url) == "https://proxy.local/v3/images/generations"
        assert request.headers["authorization"] == "Bearer secret"
        assert request.headers["x-team"] == "pptist"

    @pytest.mark.asyncio
    async def test_api_key_from_environment(self, transport_builder, monkeypatch):
        monkeypatch.setenv("ARK_API_KEY", "env-key")
        provider = create_volcengine(transport=transport_builder.json_response(build_image_payload()))

        await provider("m").generate_image("p")

        assert transport_builder.last_request.headers["authorization"] == "Bearer env-key"

    @pytest.mark.asyncio
    async def test_api_key_is_read_per_request(self, transport_builder, monkeypatch):
        """环境变量变化后下一次请求使用新密钥"""
        monkeypatch.setenv("ARK_API_KEY", "first")
        model = create_volcengine(transport=transport_builder.json_response(build_image_payload()))("m")

        await model.generate_image("p")
        monkeypatch.setenv("ARK_API_KEY", "second")
        await model.generate_image("p")

        assert [r.headers["authorization"] for r in transport_builder.requests] == [
            "Bearer first",
            "Bearer second",
        ]

    @pytest.mark.asyncio
    async def test_missing_api_key_fails_lazily(self, transport_builder, monkeypatch):
        """创建时不检查密钥，请求时才报错且不发出请求"""
        monkeypatch.delenv("ARK_API_KEY", raising=False)
        monkeypatch.setattr(settings, "ark_api_key", "")
        model = create_volcengine(transport=transport_builder.json_response(build_image_payload()))("m")

        with pytest.raises(LoadAPIKeyError) as exc_info:
            await model.generate_image("p")

        assert "ARK_API_KEY" in exc_info.value.message
        assert transport_builder.requests == []

    @pytest.mark.asyncio
    async def test_api_key_from_settings(self, transport_builder, monkeypatch):
        monkeypatch.delenv("ARK_API_KEY", raising=False)
        monkeypatch.setattr(settings, "ark_api_key", "settings-key")
        model = create_volcengine(transport=transport_builder.json_response(build_image_payload()))("m")

        await model.generate_image("p")

        assert transport_builder.last_request.headers["authorization"] == "Bearer settings-key"


@pytest.mark.unit
@pytest.mark.provider
class TestImageModelFactory:
    """ImageModelFactory 测试类"""

    def setup_method(self):
        """每个测试前备份注册表"""
        self._saved = ImageModelFactory.get_available_providers()

    def teardown_method(self):
        ImageModelFactory._providers = self._saved

    def test_register_all_providers(self):
        register_all_providers()
        assert ImageModelFactory.is_provider_supported("volcengine")
        assert "volcengine" in ImageModelFactory.get_available_providers()

    def test_create_model(self):
        register_all_providers()

        model = ImageModelFactory.create_model(
            "volcengine",
            "doubao-seedream-4-5-251128",
            api_key="k",
            base_url="https://proxy.local/v3",
        )

        assert isinstance(model, VolcengineImageModel)
        assert model.config.base_url == "https://proxy.local/v3"

    def test_unknown_provider(self):
        with pytest.raises(ProviderNotFoundError) as exc_info:
            ImageModelFactory.create_model("unknown", "m")

        assert exc_info.value.provider_name == "unknown"

    def test_register_custom_provider(self):
        register_provider("ark-proxy", lambda **options: VolcengineProvider(api_key="k", **options))

        model = ImageModelFactory.create_model("ark-proxy", "m", base_url="https://other.local")

        assert model.config.base_url == "https://other.local"

    def test_unregister_provider(self):
        register_provider("temp", create_volcengine)
        ImageModelFactory.unregister_provider("temp")
        assert not ImageModelFactory.is_provider_supported("temp")
