"""Content shared by several patterns.

Only content that is byte-identical across patterns lives here; anything
that differs per pattern stays in that pattern's module.
"""

from __future__ import annotations

from react_scaffolder.patterns.types import FileSpec, json_file, text_file

VITE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" aria-hidden="true" role="img" class="iconify iconify--logos" width="31.88" height="32" preserveAspectRatio="xMidYMid meet" viewBox="0 0 256 257">'
    '<defs>'
    '<linearGradient id="IconifyId1813088fe1fbc01fb466" x1="-.828%" x2="57.636%" y1="7.652%" y2="78.411%">'
    '<stop offset="0%" stop-color="#41D1FF">'
    '</stop>'
    '<stop offset="100%" stop-color="#BD34FE">'
    '</stop>'
    '</linearGradient>'
    '<linearGradient id="IconifyId1813088fe1fbc01fb467" x1="43.376%" x2="50.316%" y1="2.242%" y2="89.03%">'
    '<stop offset="0%" stop-color="#FFEA83">'
    '</stop>'
    '<stop offset="8.333%" stop-color="#FFDD35">'
    '</stop>'
    '<stop offset="100%" stop-color="#FFA800">'
    '</stop>'
    '</linearGradient>'
    '</defs>'
    '<path fill="url(#IconifyId1813088fe1fbc01fb466)" '
    'd="M255.153 37.938L134.897 252.976c-2.483 4.44-8.862 4.466-11.382.04'
    '8L.875 37.958c-2.746-4.814 1.371-10.646 6.827-9.67l120.385 21.517a6.'
    '537 6.537 0 0 0 2.322-.004l117.867-21.483c5.438-.991 9.574 4.796 6.8'
    '77 9.62Z">'
    '</path>'
    '<path fill="url(#IconifyId1813088fe1fbc01fb467)" '
    'd="M185.432.063L96.44 17.501a3.268 3.268 0 0 0-2.634 3.014l-5.474 92'
    '.456a3.268 3.268 0 0 0 3.997 3.378l24.777-5.718c2.318-.535 4.413 1.5'
    '07 3.936 3.838l-7.361 36.047c-.495 2.426 1.782 4.5 4.151 3.78l15.304'
    '-4.649c2.372-.72 4.652 1.36 4.15 3.788l-11.698 56.621c-.732 3.542 3.'
    '979 5.473 5.943 2.437l1.313-2.028l72.516-144.72c1.215-2.423-.88-5.18'
    '6-3.54-4.672l-25.505 4.922c-2.396.462-4.435-1.77-3.759-4.114l16.646-'
    '57.705c.677-2.35-1.37-4.583-3.769-4.113Z">'
    '</path>'
    '</svg>'
    '\n'
)

ASSET_DIRECTORIES: tuple[str, ...] = (
    "src/assets/images",
    "src/assets/icons",
    "src/assets/fonts",
)

ESLINT_TS_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/react": "^18.3.3",
    "@types/react-dom": "^18.3.0",
    "@typescript-eslint/eslint-plugin": "^7.13.1",
    "@typescript-eslint/parser": "^7.13.1",
    "@vitejs/plugin-react": "^4.3.1",
    "eslint": "^8.57.0",
    "eslint-plugin-react-hooks": "^4.6.2",
    "eslint-plugin-react-refresh": "^0.4.7",
    "typescript": "^5.2.2",
    "vite": "^5.3.1",
}


def gitkeep_files(directories: tuple[str, ...]) -> tuple[FileSpec, ...]:
    """Return empty ``.gitkeep`` files for each directory, in order."""
    return tuple(text_file(f"{d}/.gitkeep", "") for d in directories)


def app_tsx(heading: str) -> FileSpec:
    """Return the root ``App`` component rendering ``heading``."""
    return text_file(
        "src/App.tsx",
        "import React from 'react';\n"
        "\n"
        "function App() {\n"
        f"  return <div>{heading}</div>;\n"
        "}\n"
        "\n"
        "export default App;\n",
    )


def main_tsx(*extra_imports: str) -> FileSpec:
    """Return the Vite entry point, with optional side-effect imports."""
    imports = "".join(f"import '{name}';\n" for name in extra_imports)
    return text_file(
        "src/main.tsx",
        "import React from 'react';\n"
        "import ReactDOM from 'react-dom/client';\n"
        "import App from './App';\n"
        f"{imports}"
        "\n"
        "ReactDOM.createRoot(document.getElementById('root')!).render(\n"
        "  <React.StrictMode>\n"
        "    <App />\n"
        "  </React.StrictMode>\n"
        ");\n",
    )


def index_html(title: str, description: str | None = None) -> FileSpec:
    """Return ``public/index.html`` with the given page title."""
    meta = (
        f'    <meta name="description" content="{description}" />\n'
        if description
        else ""
    )
    return text_file(
        "public/index.html",
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="UTF-8" />\n'
        '    <link rel="icon" type="image/svg+xml" href="/vite.svg" />\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0" />\n'
        f"{meta}"
        f"    <title>{title}</title>\n"
        "  </head>\n"
        "  <body>\n"
        '    <div id="root"></div>\n'
        '    <script type="module" src="/src/main.tsx"></script>\n'
        "  </body>\n"
        "</html>\n",
    )


def vite_svg() -> FileSpec:
    return text_file("public/vite.svg", VITE_SVG)


def tsconfig(
    aliases: dict[str, list[str]] | None = None,
) -> FileSpec:
    """Return ``tsconfig.json``; ``aliases`` adds baseUrl and paths."""
    compiler_options: dict[str, object] = {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    }
    if aliases:
        compiler_options["baseUrl"] = "."
        compiler_options["paths"] = aliases
    return json_file(
        "tsconfig.json",
        {
            "compilerOptions": compiler_options,
            "include": ["src"],
            "references": [{"path": "./tsconfig.node.json"}],
        },
    )


def tsconfig_node() -> FileSpec:
    return json_file(
        "tsconfig.node.json",
        {
            "compilerOptions": {
                "composite": True,
                "skipLibCheck": True,
                "module": "ESNext",
                "moduleResolution": "bundler",
                "allowSyntheticDefaultImports": True,
            },
            "include": ["vite.config.ts"],
        },
    )
