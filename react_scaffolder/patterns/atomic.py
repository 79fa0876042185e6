"""Atomic Design pattern: components grouped by granularity."""

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
from react_scaffolder.patterns.types import PatternDefinition, json_file, text_file

_VITE_CONFIG_TS = """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';

export default defineConfig({
  plugins: [react()],
  publicDir: 'public',
});
"""

_GITIGNORE = "node_modules\ndist\n.env\n.env.local\n*.log\n.DS_Store\nstorybook-static\n"

_README = """\
# Atomic Design React Architecture

Generated by MCP scaffolder.

## Structure

Based on Brad Frost's Atomic Design methodology:

- `/public` - Static assets (index.html, favicon)
- **Atoms**: Basic building blocks (buttons, inputs, labels)
- **Molecules**: Simple combinations of atoms (search form, card header)
- **Organisms**: Complex UI components (header, product card)
- **Templates**: Page-level layouts
- **Pages**: Specific instances of templates with real data
- `/src/assets` - Application assets (images, icons, fonts)

## Best Practices

1. Keep atoms simple and reusable
2. Molecules combine 2-3 atoms
3. Organisms are feature-complete sections
4. Use Storybook for component documentation

## Get Started

```bash
npm install
npm run dev
```

## Storybook

```bash
npm run storybook
```
"""

ATOMIC = PatternDefinition(
    label="Atomic Design",
    directories=(
        "public",
        "src/components/atoms",
        "src/components/molecules",
        "src/components/organisms",
        "src/components/templates",
        "src/pages",
        "src/styles",
        "src/hooks",
        "src/services",
        "src/utils",
        *ASSET_DIRECTORIES,
    ),
    files=(
        *gitkeep_files(ASSET_DIRECTORIES),
        text_file("src/components/atoms/index.ts", "// Basic building blocks\nexport {};\n"),
        text_file("src/components/molecules/index.ts", "// Composite of atoms\nexport {};\n"),
        text_file("src/components/organisms/index.ts", "// Complex UI sections\nexport {};\n"),
        text_file("src/components/templates/index.ts", "// Page layouts\nexport {};\n"),
        text_file("src/pages/index.ts", "// Page instances\nexport {};\n"),
        text_file("src/styles/index.ts", "export {};\n"),
        text_file("src/hooks/index.ts", "export {};\n"),
        text_file("src/services/index.ts", "export {};\n"),
        text_file("src/utils/index.ts", "export {};\n"),
        text_file(
            "src/types.ts",
            "// Shared app types\nexport type AppType = unknown;\n",
        ),
        app_tsx("React App - Atomic Design"),
        main_tsx("./styles"),
        json_file(
            "package.json",
            {
                "name": "react-app-atomic",
                "version": "0.1.0",
                "private": True,
                "type": "module",
                "scripts": {
                    "dev": "vite",
                    "build": "tsc && vite build",
                    "lint": "eslint . --ext ts,tsx",
                    "preview": "vite preview",
                    "storybook": "storybook dev -p 6006",
                    "build-storybook": "storybook build",
                },
                "dependencies": {
                    "react": "^18.3.1",
                    "react-dom": "^18.3.1",
                },
                "devDependencies": dict(ESLINT_TS_DEV_DEPENDENCIES),
            },
        ),
        tsconfig(),
        tsconfig_node(),
        text_file("vite.config.ts", _VITE_CONFIG_TS),
        index_html("React App - Atomic Design"),
        vite_svg(),
        text_file(".gitignore", _GITIGNORE),
        text_file("README.md", _README),
    ),
)
