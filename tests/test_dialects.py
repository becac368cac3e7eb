"""Tests for the dialect registry and the vue / html dialects."""

import pytest

from figma_codegen.dialects import (
    DIALECT_CLASSES,
    HtmlDialect,
    OutputDialect,
    ReactDialect,
    VueDialect,
    create_dialect,
    get_dialect_class,
    is_dialect_registered,
    list_dialects,
    register_dialect,
)
from figma_codegen.generator import CodeGenerator
from figma_codegen.models import GenerationConfig

from tests.factories import bbox, make_frame, make_node, make_text, solid


def _login():
    return make_frame("1:1", "Login", [
        make_text("1:2", "Email Input", "Email"),
        make_frame("1:3", "Submit Button", [make_text("1:4", "Label", "Sign in")]),
    ], absoluteBoundingBox=bbox(0, 0, 320, 200), fills=[solid(1, 1, 1)])


def _screen_with_card():
    return make_frame("1:1", "Screen", [
        make_node("1:2", "Card", "INSTANCE", [make_text("1:3", "Price", "$9")]),
    ], fills=[solid(1, 1, 1)])


def _generate(root, **options):
    return CodeGenerator(GenerationConfig(**options)).generate(root)


# ─── Registry ───────────────────────────────────────────────────────


class TestRegistry:

    def test_builtin_dialects_registered(self):
        assert list_dialects() == ["html", "react", "vue"]
        assert get_dialect_class("react") is ReactDialect
        assert is_dialect_registered("vue")
        assert not is_dialect_registered("svelte")

    def test_create_dialect(self):
        dialect = create_dialect(GenerationConfig(output_dialect="vue"))
        assert isinstance(dialect, VueDialect)
        assert dialect.name == "vue"

    def test_create_default_dialect(self):
        assert isinstance(create_dialect(), ReactDialect)

    def test_unknown_dialect_raises(self):
        config = GenerationConfig.model_construct(output_dialect="svelte")
        with pytest.raises(ValueError, match="Unknown output dialect: svelte"):
            create_dialect(config)

    def test_custom_dialect_registration(self):
        @register_dialect("plain")
        class PlainDialect(OutputDialect):
            def assemble_unit(self, request):
                return {f"{request.name}.txt": request.markup}

        try:
            assert PlainDialect.name == "plain"
            assert get_dialect_class("plain") is PlainDialect
            assert "plain" in list_dialects()
        finally:
            DIALECT_CLASSES.pop("plain", None)


class TestConfigDialect:

    def test_unknown_name_falls_back_to_react(self):
        assert GenerationConfig(output_dialect="svelte").output_dialect == "react"

    def test_name_is_lowercased(self):
        assert GenerationConfig(output_dialect=" VUE ").output_dialect == "vue"

    def test_defaults(self):
        config = GenerationConfig()
        assert config.output_dialect == "react"
        assert config.typed is True
        assert config.componentize is True
        assert config.css_framework == "none"
        assert config.component_name is None


# ─── Vue ────────────────────────────────────────────────────────────


class TestVueDialect:

    def test_login_component(self):
        files = _generate(_login(), output_dialect="vue")
        assert list(files) == ["components/Login/Login.vue"]
        content = files["components/Login/Login.vue"]
        assert content.startswith(
            "<template>\n"
            '  <div class="login">\n'
            '    <input class="email-input" type="text" :value="emailInput" '
            '@input="handleEmailInputChange" placeholder="Email" />\n'
            '    <button class="submit-button" @click="handleSubmitButton">\n'
            '      <p class="label">Sign in</p>\n'
            "    </button>\n"
            "  </div>\n"
            "</template>\n"
            "\n"
            '<script setup lang="ts">\n'
            "import { ref } from 'vue';\n"
            "\n"
            "const emailInput = ref<string>('');\n"
            "\n"
            "function handleEmailInputChange(e: Event) {\n"
            "  emailInput.value = (e.target as HTMLInputElement).value;\n"
            "}\n"
            "\n"
            "function handleSubmitButton() {\n"
            "  // Add click behaviour here\n"
            "}\n"
            "</script>\n"
            "\n"
            "<style scoped>\n"
            "/* Design tokens */"
        )
        assert content.endswith("}\n</style>\n")

    def test_untyped_script(self):
        content = _generate(_login(), output_dialect="vue", typed=False)["components/Login/Login.vue"]
        assert "<script setup>\n" in content
        assert "const emailInput = ref('');" in content
        assert "function handleEmailInputChange(e) {\n  emailInput.value = e.target.value;\n}" in content

    def test_aggregated_state_uses_reactive(self):
        toggles = [
            make_frame(f"2:{i}", f"Toggle {letter}", absoluteBoundingBox=bbox(0, i * 40))
            for i, letter in enumerate("ABCD")
        ]
        root = make_frame("2:0", "Settings", toggles)
        content = _generate(root, output_dialect="vue")["components/Settings/Settings.vue"]
        assert "import { reactive } from 'vue';" in content
        assert (
            "const state = reactive({\n"
            "  toggleA: false,\n"
            "  toggleB: false,\n"
            "  toggleC: false,\n"
            "  toggleD: false\n"
            "});"
        ) in content
        assert "function handleToggleAToggle() {\n  state.toggleA = !state.toggleA;\n}" in content

    def test_sub_component_is_imported_and_referenced(self):
        files = _generate(_screen_with_card(), output_dialect="vue")
        assert sorted(files) == ["components/Card/Card.vue", "components/Screen/Screen.vue"]
        screen = files["components/Screen/Screen.vue"]
        assert "import Card from '../Card/Card.vue';" in screen
        assert '<Card class="card" />' in screen
        assert "$9" in files["components/Card/Card.vue"]

    def test_flat_layout(self):
        files = _generate(_login(), output_dialect="vue", componentize=False)
        assert list(files) == ["Login.vue"]


# ─── HTML ───────────────────────────────────────────────────────────


class TestHtmlDialect:

    def test_page_and_stylesheet(self):
        files = _generate(_login(), output_dialect="html")
        assert sorted(files) == ["index.html", "styles.css"]
        page = files["index.html"]
        assert page.startswith("<!DOCTYPE html>\n")
        assert "<title>Login</title>" in page
        assert '<link rel="stylesheet" href="styles.css">' in page
        assert '    <input class="email-input" type="text" placeholder="Email" />' in page
        assert '    <button class="submit-button">' in page
        assert "handle" not in page
        assert files["styles.css"].startswith("/* Design tokens */")
        assert files["styles.css"].endswith("}\n")

    def test_boundaries_are_inlined(self):
        files = _generate(_screen_with_card(), output_dialect="html")
        assert sorted(files) == ["index.html", "styles.css"]
        assert "<Card" not in files["index.html"]
        assert "$9" in files["index.html"]

    def test_never_componentizes(self):
        generator = CodeGenerator(GenerationConfig(output_dialect="html"))
        assert isinstance(generator.dialect, HtmlDialect)
        assert generator.componentize is False
        assert generator.dialect.unit_dir("Login") == ""
