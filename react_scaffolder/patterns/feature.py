"""Feature-Based (Modular) pattern: one self-contained folder per feature."""

from __future__ import annotations

from react_scaffolder.patterns.shared import (
    ASSET_DIRECTORIES,
    ESLINT_TS_DEV_DEPENDENCIES,
    app_tsx,
    gitkeep_files,
    index_html,
    main_tsx,
    tsconfig,
    tsconfig_node,
    vite_svg,
)
from react_scaffolder.patterns.types import (
    FileSpec,
    PatternDefinition,
    json_file,
    text_file,
)

_FEATURES = ("auth", "dashboard")
_FEATURE_SLICES = ("components", "hooks", "api")
_SHARED_SLICES = ("components", "hooks", "services", "utils", "types")

_FEATURE_INDEX_TS = "export * from './components';\nexport * from './hooks';\n"

_VITE_CONFIG_TS = """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';
import path from 'path';

export default defineConfig({
  plugins: [react()],
  publicDir: 'public',
  resolve: {
    alias: {
      '@features': path.resolve(__dirname, './src/features'),
      '@shared': path.resolve(__dirname, './src/shared'),
      '@assets': path.resolve(__dirname, './src/assets'),
    },
  },
});
"""

_GITIGNORE = "node_modules\ndist\n.env\n.env.local\n*.log\n.DS_Store\n"

_README = """\
# Feature-Based React Architecture

Generated by MCP scaffolder.

## Structure

Each feature is self-contained with its own components, hooks, and API logic:

- `/public` - Static assets (index.html, favicon)
- `/src/features/auth` - Authentication feature
- `/src/features/dashboard` - Dashboard feature
- `/src/shared` - Shared components, hooks, services, and utilities
- `/src/assets` - Application assets (images, icons, fonts)

## Path Aliases

- `@features/*` → `src/features/*`
- `@shared/*` → `src/shared/*`
- `@assets/*` → `src/assets/*`

## Get Started

```bash
npm install
npm run dev
```
"""


def _feature_files(feature: str) -> tuple[FileSpec, ...]:
    base = f"src/features/{feature}"
    return (
        text_file(f"{base}/index.ts", _FEATURE_INDEX_TS),
        *(text_file(f"{base}/{s}/index.ts", "export {};\n") for s in _FEATURE_SLICES),
    )


FEATURE = PatternDefinition(
    label="Feature-Based (Modular)",
    directories=(
        "public",
        *(f"src/features/{f}/{s}" for f in _FEATURES for s in _FEATURE_SLICES),
        *(f"src/shared/{s}" for s in _SHARED_SLICES),
        *ASSET_DIRECTORIES,
    ),
    files=(
        *gitkeep_files(ASSET_DIRECTORIES),
        *(spec for f in _FEATURES for spec in _feature_files(f)),
        text_file("src/shared/components/index.ts", "export {};\n"),
        text_file("src/shared/hooks/index.ts", "export {};\n"),
        text_file("src/shared/services/index.ts", "export {};\n"),
        text_file("src/shared/utils/index.ts", "export {};\n"),
        text_file("src/shared/types/index.ts", "export type AppType = unknown;\n"),
        app_tsx("React App - Feature-Based"),
        main_tsx(),
        json_file(
            "package.json",
            {
                "name": "react-app-feature-based",
                "version": "0.1.0",
                "private": True,
                "type": "module",
                "scripts": {
                    "dev": "vite",
                    "build": "tsc && vite build",
                    "lint": "eslint . --ext ts,tsx",
                    "preview": "vite preview",
                },
                "dependencies": {
                    "react": "^18.3.1",
                    "react-dom": "^18.3.1",
                },
                "devDependencies": dict(ESLINT_TS_DEV_DEPENDENCIES),
            },
        ),
        tsconfig(
            {
                "@features/*": ["src/features/*"],
                "@shared/*": ["src/shared/*"],
                "@assets/*": ["src/assets/*"],
            }
        ),
        tsconfig_node(),
        text_file("vite.config.ts", _VITE_CONFIG_TS),
        index_html("React App - Feature-Based"),
        vite_svg(),
        text_file(".gitignore", _GITIGNORE),
        text_file("README.md", _README),
    ),
)
