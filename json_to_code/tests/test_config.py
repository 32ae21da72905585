from json_to_code.pipeline.config import CodeGeneratorConfig


class TestCodeGeneratorConfig:
    """Test configuration loading"""

    def test_defaults(self):
        """Test default values"""
        config = CodeGeneratorConfig()
        assert config.root_class_name == "RootClass"
        assert config.language == "swift"
        assert config.include_constructors
        assert config.include_utilities
        assert config.add_generation_comment

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown keys in a config file are ignored"""
        config = CodeGeneratorConfig.from_dict({"language": "cs", "class_prefix": "My", "unknown": 1})
        assert config.language == "cs"
        assert config.class_prefix == "My"
        assert not hasattr(config, "unknown")

    def test_round_trip(self):
        """Test that to_dict feeds back into from_dict"""
        config = CodeGeneratorConfig(root_class_name="User", include_utilities=False, first_line="// x")
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config
