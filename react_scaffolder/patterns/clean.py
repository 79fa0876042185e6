"""Clean Architecture (Backend-Agnostic) pattern.

Business logic under ``src/backend`` depends on nothing; the React layer
under ``src/frontend`` depends on backend interfaces only.
"""

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

# (relative path, one-line purpose) in declaration order
_LAYER_INDEXES: tuple[tuple[str, str], ...] = (
    ("src/backend/entities", "Core business entities (language-agnostic structures)"),
    ("src/backend/usecases", "Business use cases and application logic"),
    ("src/backend/interfaces", "Repository and service interfaces"),
    ("src/backend/repositories", "Repository implementations for data access"),
    ("src/backend/services", "External API clients and services"),
    ("src/backend/mappers", "DTO to Entity mappers"),
    ("src/frontend/components", "Reusable UI components"),
    ("src/frontend/viewmodels", "ViewModels for state management"),
    ("src/frontend/pages", "Page-level components"),
    ("src/frontend/hooks", "Custom React hooks"),
    ("src/shared/utils", "Shared utility functions"),
    ("src/shared/constants", "Shared constants"),
)

_VITE_CONFIG_TS = """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';
import path from 'path';

export default defineConfig({
  plugins: [react()],
  publicDir: 'public',
  resolve: {
    alias: {
      '@backend': path.resolve(__dirname, './src/backend'),
      '@frontend': path.resolve(__dirname, './src/frontend'),
      '@shared': path.resolve(__dirname, './src/shared'),
      '@assets': path.resolve(__dirname, './src/assets'),
    },
  },
  test: {
    globals: true,
    environment: 'jsdom',
  },
});
"""

_GITIGNORE = "node_modules\ndist\n.env\n.env.local\n*.log\n.DS_Store\ncoverage\n"

_README = """\
# Clean Architecture React Application

Generated by MCP scaffolder.

## Architecture Overview

This architecture separates concerns into distinct layers, making it easier for teams to work independently and maintain the codebase.

## Structure

### 📁 `/public`
- Static assets (index.html, favicon)

### 🔧 `/src/backend` (Business Logic - Language Agnostic)
- **entities/**: Core business objects and data structures
- **usecases/**: Application-specific business rules and logic
- **interfaces/**: Contracts/interfaces for repositories and services
- **repositories/**: Data access implementations
- **services/**: External API clients and integrations
- **mappers/**: Transform data between layers (DTO ↔ Entity)

> 💡 **Note**: The backend folder contains business logic that can be implemented in any language (.NET, Java, Python, Node.js). The structure shown here is for frontend integration.

### 🎨 `/src/frontend` (UI Layer - React)
- **components/**: Reusable UI components
- **viewmodels/**: State management and UI logic
- **pages/**: Page-level route components
- **hooks/**: Custom React hooks

### 🤝 `/src/shared`
- **utils/**: Helper functions used across layers
- **constants/**: Shared constants and configurations
- **types/**: Shared TypeScript type definitions

### 🖼️ `/src/assets`
- Application assets (images, icons, fonts)

## Dependency Rule

Dependencies flow inward (Dependency Inversion Principle):
- **Frontend** depends on **Backend** interfaces
- **Backend** implementations depend on **Backend** interfaces
- **Backend** core entities depend on nothing (pure business logic)

This allows you to:
- Replace the backend implementation without changing frontend
- Test business logic independently
- Scale and maintain code more easily

## Path Aliases

- `@backend/*` → `src/backend/*`
- `@frontend/*` → `src/frontend/*`
- `@shared/*` → `src/shared/*`
- `@assets/*` → `src/assets/*`

## Get Started

```bash
npm install
npm run dev
```

## Testing

```bash
npm test
```

## Best Practices

1. Keep business logic in `/backend` - it should be framework-agnostic
2. UI components in `/frontend` should be dumb and reusable
3. Use ViewModels to orchestrate business logic and UI state
4. Define interfaces in `/backend/interfaces` before implementations
5. Use mappers to transform data between API responses and entities
"""

CLEAN = PatternDefinition(
    label="Clean Architecture (Backend-Agnostic)",
    directories=(
        "public",
        *(path for path, _ in _LAYER_INDEXES),
        "src/shared/types",
        *ASSET_DIRECTORIES,
    ),
    files=(
        *gitkeep_files(ASSET_DIRECTORIES),
        *(
            text_file(f"{path}/index.ts", f"// {purpose}\nexport {{}};\n")
            for path, purpose in _LAYER_INDEXES
        ),
        text_file(
            "src/shared/types/index.ts",
            "// Shared TypeScript types\nexport type AppType = unknown;\n",
        ),
        app_tsx("React App - Clean Architecture"),
        main_tsx(),
        json_file(
            "package.json",
            {
                "name": "react-app-clean-architecture",
                "version": "0.1.0",
                "private": True,
                "type": "module",
                "scripts": {
                    "dev": "vite",
                    "build": "tsc && vite build",
                    "lint": "eslint . --ext ts,tsx",
                    "test": "vitest",
                    "preview": "vite preview",
                },
                "dependencies": {
                    "react": "^18.3.1",
                    "react-dom": "^18.3.1",
                },
                "devDependencies": {
                    **ESLINT_TS_DEV_DEPENDENCIES,
                    "vitest": "^1.6.0",
                },
            },
        ),
        tsconfig(
            {
                "@backend/*": ["src/backend/*"],
                "@frontend/*": ["src/frontend/*"],
                "@shared/*": ["src/shared/*"],
                "@assets/*": ["src/assets/*"],
            }
        ),
        tsconfig_node(),
        text_file("vite.config.ts", _VITE_CONFIG_TS),
        index_html("React App - Clean Architecture"),
        vite_svg(),
        text_file(".gitignore", _GITIGNORE),
        text_file("README.md", _README),
    ),
)
