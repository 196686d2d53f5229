"""Static configuration documents written into a new workspace."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

APP_PORT = 54321
APP_GREETING = "Hello World"


class _Document(BaseModel):
    """Base class for documents serialised with camelCase keys."""

    model_config = ConfigDict(extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping keyed by the document's aliases."""

        return self.model_dump(mode="json", by_alias=True)


class CompilerOptions(_Document):
    """TypeScript compiler options for a NodeNext project."""

    es_module_interop: bool = True
    skip_lib_check: bool = True
    target: str = "es2022"
    allow_js: bool = True
    resolve_json_module: bool = True
    module_detection: str = "force"
    isolated_modules: bool = True
    strict: bool = True
    no_unchecked_indexed_access: bool = True
    module_resolution: str = "NodeNext"
    module: str = "NodeNext"
    out_dir: str = "dist"
    root_dir: str = "src"
    source_map: bool = True
    lib: List[str] = Field(default_factory=lambda: ["es2022", "dom", "dom.iterable"])


class NestedCompilerOptions(_Document):
    """Outer ``compilerOptions`` object of the generated ``tsconfig.json``.

    A second ``compilerOptions`` object is nested here and ``include``/``exclude``
    sit at this level rather than at the document root. Generated files keep
    this layout; moving the keys changes the output of every project.
    """

    compiler_options: CompilerOptions = Field(default_factory=CompilerOptions)
    include: List[str] = Field(default_factory=lambda: ["src/**/*"])
    exclude: List[str] = Field(default_factory=lambda: ["node_modules"])


class TsConfig(_Document):
    """Document written to ``tsconfig.json``."""

    compiler_options: NestedCompilerOptions = Field(default_factory=NestedCompilerOptions)


class EslintConfig(_Document):
    """Document written to ``.eslintrc.json``."""

    env: Dict[str, bool] = Field(default_factory=lambda: {"browser": True, "es2021": True, "node": True})
    extends: List[str] = Field(
        default_factory=lambda: ["eslint:recommended", "plugin:@typescript-eslint/recommended"]
    )
    parser: str = "@typescript-eslint/parser"
    parser_options: Dict[str, Any] = Field(
        default_factory=lambda: {"ecmaVersion": 12, "sourceType": "module"}
    )
    plugins: List[str] = Field(default_factory=lambda: ["@typescript-eslint"])
    rules: Dict[str, Any] = Field(
        default_factory=lambda: {
            "indent": ["error", 2],
            "linebreak-style": ["error", "unix"],
            "quotes": ["error", "single"],
            "semi": ["error", "always"],
            "@typescript-eslint/explicit-module-boundary-types": "off",
            "@typescript-eslint/no-explicit-any": "off",
        }
    )


class PrettierConfig(_Document):
    """Document written to ``.prettierrc.json``."""

    semi: bool = True
    trailing_comma: str = "all"
    single_quote: bool = True
    print_width: int = 80
    tab_width: int = 2


EXPRESS_APP_TEMPLATE = """
import express from 'express';
const app=express();
const port = {port};
app.get('/',(req,res)=>{{
    res.send('{greeting}');
}});
app.listen(port,()=>{{
  console.log(`Server running at http://localhost:${{port}}`);
}});"""


def render_express_app(port: int = APP_PORT, greeting: str = APP_GREETING) -> str:
    """Return the source of the minimal express server written to ``src/app.ts``."""

    return EXPRESS_APP_TEMPLATE.format(port=port, greeting=greeting)


__all__ = [
    "APP_GREETING",
    "APP_PORT",
    "CompilerOptions",
    "EslintConfig",
    "NestedCompilerOptions",
    "PrettierConfig",
    "TsConfig",
    "render_express_app",
]
