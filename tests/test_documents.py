from __future__ import annotations

import importlib

import pytest
from pydantic import ValidationError

from tsforge.documents import (
    APP_PORT,
    EslintConfig,
    PrettierConfig,
    TsConfig,
    render_express_app,
)


def test_tsconfig_keeps_nested_compiler_options_layout():
    assert TsConfig().to_json() == {
        "compilerOptions": {
            "compilerOptions": {
                "esModuleInterop": True,
                "skipLibCheck": True,
                "target": "es2022",
                "allowJs": True,
                "resolveJsonModule": True,
                "moduleDetection": "force",
                "isolatedModules": True,
                "strict": True,
                "noUncheckedIndexedAccess": True,
                "moduleResolution": "NodeNext",
                "module": "NodeNext",
                "outDir": "dist",
                "rootDir": "src",
                "sourceMap": True,
                "lib": ["es2022", "dom", "dom.iterable"],
            },
            "include": ["src/**/*"],
            "exclude": ["node_modules"],
        }
    }


def test_tsconfig_key_order_follows_declaration():
    outer = TsConfig().to_json()["compilerOptions"]
    assert list(outer) == ["compilerOptions", "include", "exclude"]
    assert list(outer["compilerOptions"])[:3] == ["esModuleInterop", "skipLibCheck", "target"]


def test_package_imports_and_dumps_eslint_config():
    tsforge = importlib.import_module("tsforge")
    assert tsforge.__version__
    assert EslintConfig().to_json()["parser"] == "@typescript-eslint/parser"


def test_eslint_config_matches_fixed_rule_set():
    config = EslintConfig().to_json()
    assert list(config) == ["env", "extends", "parser", "parserOptions", "plugins", "rules"]
    assert config == {
        "env": {"browser": True, "es2021": True, "node": True},
        "extends": ["eslint:recommended", "plugin:@typescript-eslint/recommended"],
        "parser": "@typescript-eslint/parser",
        "parserOptions": {"ecmaVersion": 12, "sourceType": "module"},
        "plugins": ["@typescript-eslint"],
        "rules": {
            "indent": ["error", 2],
            "linebreak-style": ["error", "unix"],
            "quotes": ["error", "single"],
            "semi": ["error", "always"],
            "@typescript-eslint/explicit-module-boundary-types": "off",
            "@typescript-eslint/no-explicit-any": "off",
        },
    }


def test_prettier_config_uses_camel_case_keys():
    assert PrettierConfig().to_json() == {
        "semi": True,
        "trailingComma": "all",
        "singleQuote": True,
        "printWidth": 80,
        "tabWidth": 2,
    }


def test_documents_are_frozen_and_strict():
    config = PrettierConfig()
    with pytest.raises(ValidationError):
        config.semi = False
    with pytest.raises(ValidationError):
        PrettierConfig(unknown=True)


def test_express_app_listens_on_fixed_port_with_greeting():
    source = render_express_app()
    assert APP_PORT == 54321
    assert "const port = 54321;" in source
    assert "app.get('/',(req,res)=>{" in source
    assert "res.send('Hello World');" in source
    assert "console.log(`Server running at http://localhost:${port}`);" in source
    assert source.count("app.get(") == 1
