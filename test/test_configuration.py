"""
Tests for the Configuration object: settings, extension points and sealing
"""

from types import MappingProxyType, SimpleNamespace

import pytest
from pydantic import ValidationError

from pageflow.admin_tabs import Tab
from pageflow.configuration import Configuration
from pageflow.exceptions import ConfigurationError, ConfigurationSealedError
from pageflow.hooks import HOOK_SUBMIT_FILE
from pageflow.page_types import PageType
from pageflow.quotas import Quotas
from pageflow.request_scopes import CnameThemingRequestScope, all_entries
from pageflow.settings import CSS_RENDERED_THUMBNAIL_STYLES, PageflowSettings


class VideoPageType(PageType):
    name = "video"


class TestSettings:
    def test_defaults(self, config):
        assert config.mailer_sender == "pageflow@example.com"
        assert config.paperclip_filesystem_default_options == {}
        assert config.paperclip_s3_default_options == {}
        assert config.zencoder_options == {}
        assert config.thumbnail_styles == {}
        assert config.paperclip_attachments_version is None
        assert config.confirm_encoding_jobs is False
        assert config.css_rendered_thumbnail_styles == CSS_RENDERED_THUMBNAIL_STYLES
        assert config.available_locales == ["de", "en"]

    def test_assignment_updates_setting(self, config):
        config.mailer_sender = "stories@example.com"
        assert config.mailer_sender == "stories@example.com"

    def test_assignment_is_validated(self, config):
        with pytest.raises(ValidationError):
            config.thumbnail_styles = "large"

    def test_hash_settings_can_be_mutated_during_boot(self, config):
        config.zencoder_options["api_key"] = "secret"
        assert config.zencoder_options == {"api_key": "secret"}

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PAGEFLOW_MAILER_SENDER", "env@example.com")
        monkeypatch.setenv("PAGEFLOW_CONFIRM_ENCODING_JOBS", "true")

        config = Configuration(PageflowSettings(_env_file=None))

        assert config.mailer_sender == "env@example.com"
        assert config.confirm_encoding_jobs is True

    def test_unknown_attribute_raises_attribute_error(self, config):
        with pytest.raises(AttributeError):
            config.no_such_setting  # noqa: B018

    def test_instances_do_not_share_mutable_defaults(self, settings):
        first = Configuration(settings)
        second = Configuration(PageflowSettings(_env_file=None))

        first.thumbnail_styles["large"] = {"geometry": "1920x1080"}

        assert second.thumbnail_styles == {}


class TestExtensionPoints:
    def test_default_scopes(self, config):
        assert isinstance(config.theming_request_scope, CnameThemingRequestScope)
        assert config.public_entry_request_scope is all_entries
        assert config.editor_routing_constraint is None

    def test_theming_url_options_default_uses_cname(self, config):
        assert config.theming_url_options(SimpleNamespace(cname="brand.example")) == {"host": "brand.example"}
        assert config.theming_url_options(SimpleNamespace(cname="")) == {}

    def test_theming_url_options_with_callable(self, config):
        config.public_entry_url_options = lambda theming: {"host": f"{theming.account}.example.com"}

        assert config.theming_url_options(SimpleNamespace(account="acme")) == {"host": "acme.example.com"}

    def test_theming_url_options_with_mapping(self, config):
        config.public_entry_url_options = {"host": "stories.example.com"}

        options = config.theming_url_options(SimpleNamespace())

        assert options == {"host": "stories.example.com"}

    def test_registries_are_independent_per_instance(self, settings):
        first = Configuration(settings)
        second = Configuration(settings)

        first.themes.register("custom")

        assert "custom" not in second.themes


class TestSeal:
    def test_not_sealed_initially(self, config):
        assert not config.sealed

    def test_seal_returns_configuration(self, config):
        assert config.seal() is config
        assert config.sealed

    def test_seal_is_idempotent(self, config):
        config.seal()
        config.seal()

        assert config.sealed

    def test_setting_assignment_after_seal_raises(self, config):
        config.seal()

        with pytest.raises(ConfigurationSealedError):
            config.mailer_sender = "late@example.com"

    def test_extension_point_assignment_after_seal_raises(self, config):
        config.seal()

        with pytest.raises(ConfigurationSealedError):
            config.public_entry_request_scope = lambda entries, request: entries

    @pytest.mark.parametrize(
        "register",
        [
            lambda config: config.themes.register("late"),
            lambda config: config.register_page_type(VideoPageType()),
            lambda config: config.quotas.register("users", object),
            lambda config: config.help_entries.register("late"),
            lambda config: config.admin_resource_tabs.register("entry", Tab("late", None)),
            lambda config: config.hooks.subscribe(HOOK_SUBMIT_FILE, print),
        ],
    )
    def test_registration_after_seal_raises(self, config, register):
        config.seal()

        with pytest.raises(ConfigurationSealedError):
            register(config)

    def test_widget_registration_after_seal_raises(self, config):
        from pageflow.widget_types import WidgetType

        config.seal()

        with pytest.raises(ConfigurationSealedError):
            config.widget_types.register(WidgetType("late"))

    def test_lookups_work_after_seal(self, config):
        page_type = VideoPageType()
        config.register_page_type(page_type)
        config.themes.register("default")
        config.seal()

        assert config.lookup_page_type("video") is page_type
        assert config.themes.lookup("default").name == "default"
        assert config.page_type_names == ["video"]

    def test_hash_settings_are_read_only_after_seal(self, config):
        config.zencoder_options["api_key"] = "secret"
        config.seal()

        options = config.zencoder_options

        assert isinstance(options, MappingProxyType)
        assert options["api_key"] == "secret"
        with pytest.raises(TypeError):
            options["api_key"] = "changed"  # type: ignore[index]

    def test_list_settings_are_read_only_after_seal(self, config):
        config.seal()

        assert config.available_locales == ("de", "en")

    def test_nested_settings_are_read_only_after_seal(self, config):
        config.thumbnail_styles = {"thumb": {"geometry": "100x100"}}
        config.seal()

        with pytest.raises(TypeError):
            config.thumbnail_styles["thumb"]["geometry"] = "999x999"  # type: ignore[index]

        assert config.thumbnail_styles["thumb"]["geometry"] == "100x100"

    def test_settings_object_changes_after_seal_are_not_visible(self, settings):
        config = Configuration(settings)
        config.seal()

        settings.mailer_sender = "late@example.com"

        assert config.mailer_sender == "pageflow@example.com"

    def test_theme_options_are_read_only_after_seal(self, config):
        config.themes.register("plain")
        config.seal()

        with pytest.raises(TypeError):
            config.themes.lookup("plain").options["no_home_button"] = True  # type: ignore[index]

        assert config.themes.lookup("plain").has_home_button


class TestAttributeSurface:
    def test_misspelled_setting_raises(self, config):
        with pytest.raises(AttributeError):
            config.mailer_sendr = "stories@example.com"

        assert config.mailer_sender == "pageflow@example.com"

    @pytest.mark.parametrize(
        "name", ["hooks", "themes", "file_types", "widget_types", "help_entries", "admin_resource_tabs"]
    )
    def test_registries_cannot_be_replaced(self, config, name):
        registry = getattr(config, name)

        with pytest.raises(AttributeError):
            setattr(config, name, None)

        assert getattr(config, name) is registry

    def test_seal_succeeds_after_rejected_registry_assignment(self, config):
        with pytest.raises(AttributeError):
            config.hooks = None

        assert config.seal().sealed

    def test_quotas_can_be_replaced_during_boot(self, config):
        quotas = Quotas()

        config.quotas = quotas

        assert config.quotas is quotas

    def test_quotas_must_be_a_quotas_registry(self, config):
        with pytest.raises(ConfigurationError):
            config.quotas = {"users": object}

    def test_editor_route_constraint_is_an_alias(self, config):
        def constraint(request):
            return True

        config.editor_route_constraint = constraint

        assert config.editor_routing_constraint is constraint
        assert config.editor_route_constraint is constraint

    def test_editor_route_constraint_cannot_be_set_after_seal(self, config):
        config.seal()

        with pytest.raises(ConfigurationSealedError):
            config.editor_route_constraint = lambda request: True
