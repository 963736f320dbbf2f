"""
模块导入测试
测试所有模块的导入是否正常
"""

import pytest


@pytest.mark.unit
@pytest.mark.imports
class TestModuleImports:
    """模块导入测试类"""

    def test_config_import(self):
        """测试配置模块导入"""
        from volc_imggen.core.config import settings
        assert settings is not None

    def test_imggen_import(self):
        """测试图片生成模块导入"""
        from volc_imggen.core.imggen import BaseImageModel, VolcengineImageModel
        assert issubclass(VolcengineImageModel, BaseImageModel)

    def test_package_exports(self):
        """测试顶层包导出"""
        import volc_imggen
        assert volc_imggen.create_volcengine is not None
        assert volc_imggen.volcengine.image_model("m").model_id == "m"
        assert volc_imggen.__version__ == "0.1.0"
