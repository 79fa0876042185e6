"""Layered (Standard) pattern: one folder per technical concern.

The most complete of the patterns. Besides the source tree it ships a test
setup, Docker/nginx deployment files and a CI workflow.
"""

from __future__ import annotations

from react_scaffolder.patterns.shared import (
    ASSET_DIRECTORIES,
    app_tsx,
    gitkeep_files,
    index_html,
    main_tsx,
    tsconfig,
    tsconfig_node,
    vite_svg,
)
from react_scaffolder.patterns.types import PatternDefinition, json_file, text_file

_TEST_DIRECTORIES = ("tests/unit", "tests/integration", "tests/e2e")

_API_TS = """\
// Base API configuration
import axios from 'axios';

const api = axios.create({
  baseURL: import.meta.env.VITE_API_URL || 'http://localhost:3000',
  timeout: 10000,
});

export default api;
"""

_CONFIG_TS = """\
// Environment-based configuration
export const config = {
  apiUrl: import.meta.env.VITE_API_URL || 'http://localhost:3000',
  environment: import.meta.env.MODE || 'development',
};
"""

_TEST_SETUP_TS = """\
// Test setup and configuration
import { expect, afterEach } from 'vitest';
import { cleanup } from '@testing-library/react';
import '@testing-library/jest-dom';

afterEach(() => {
  cleanup();
});
"""

_VITE_CONFIG_TS = """\
import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';

export default defineConfig({
  plugins: [react()],
  publicDir: 'public',
  test: {
    globals: true,
    environment: 'jsdom',
    setupFiles: './tests/setup.ts',
    coverage: {
      provider: 'v8',
      reporter: ['text', 'json', 'html'],
      exclude: ['node_modules/', 'tests/'],
    },
  },
});
"""

_GITIGNORE = """\
node_modules
dist
build
.env
.env.local
.env.production
*.log
.DS_Store
coverage
.vscode
.idea
"""

_ENV_EXAMPLE = """\
# API Configuration
VITE_API_URL=http://localhost:3000

# Environment
NODE_ENV=development

# Feature Flags
VITE_FEATURE_NEW_UI=false
"""

_DOCKERFILE = """\
# Multi-stage build for production
FROM node:18-alpine AS builder

WORKDIR /app

COPY package*.json ./
RUN npm ci

COPY . .
RUN npm run build

# Production stage
FROM nginx:alpine

COPY --from=builder /app/dist /usr/share/nginx/html
COPY nginx.conf /etc/nginx/conf.d/default.conf

EXPOSE 80

CMD ["nginx", "-g", "daemon off;"]
"""

_NGINX_CONF = """\
server {
  listen 80;
  server_name _;
  root /usr/share/nginx/html;
  index index.html;

  location / {
    try_files $uri $uri/ /index.html;
  }

  # Security headers
  add_header X-Frame-Options "SAMEORIGIN" always;
  add_header X-Content-Type-Options "nosniff" always;
  add_header X-XSS-Protection "1; mode=block" always;

  # Gzip compression
  gzip on;
  gzip_types text/plain text/css application/json application/javascript text/xml application/xml application/xml+rss text/javascript;
}
"""

_CI_WORKFLOW = """\
name: CI/CD Pipeline

on:
  push:
    branches: [main, develop]
  pull_request:
    branches: [main, develop]

jobs:
  test:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v3
      - uses: actions/setup-node@v3
        with:
          node-version: '18'
          cache: 'npm'
      - run: npm ci
      - run: npm run lint
      - run: npm run test
      - run: npm run build

  security:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v3
      - uses: actions/setup-node@v3
        with:
          node-version: '18'
      - run: npm audit --audit-level=moderate
"""

_README = """\
# Layered React Architecture

Generated by MCP scaffolder - Production-ready React application.

## 📁 Structure

```
├── public/              # Static assets
│   ├── index.html
│   └── vite.svg
├── src/
│   ├── components/      # Reusable UI components
│   ├── hooks/           # Custom React hooks
│   ├── services/        # API clients and business logic
│   ├── pages/           # Page components
│   ├── store/           # Global state management
│   ├── styles/          # Global styles and themes
│   ├── utils/           # Utility functions
│   ├── config/          # Environment configuration
│   └── assets/          # Images, icons, fonts
├── tests/
│   ├── unit/            # Unit tests
│   ├── integration/     # Integration tests
│   └── e2e/             # End-to-end tests
├── .github/workflows/   # CI/CD pipelines
├── Dockerfile           # Container configuration
└── .env.example         # Environment variables template
```

## 🚀 Get Started

### Development
```bash
npm install
npm run dev
```

### Testing
```bash
npm run test         # Run tests
npm run test:coverage # Coverage report
```

### Production Build
```bash
npm run build
npm run preview
```

### Docker Deployment
```bash
docker build -t my-app .
docker run -p 80:80 my-app
```

## 🔒 Environment Variables

Copy `.env.example` to `.env` and configure:

- `VITE_API_URL` - Backend API URL
- `NODE_ENV` - Environment (development/production)

## 📝 Best Practices

- Components in `/components` should be reusable and well-documented
- Use custom hooks for shared logic
- Keep business logic in `/services`
- Write tests for critical functionality
- Follow TypeScript strict mode
- Use ESLint and Prettier for code quality

## 🛡️ Security

- Never commit `.env` files
- Audit dependencies regularly (`npm audit`)
- Review security headers in `nginx.conf`
- Validate all user inputs
- Use HTTPS in production
"""

LAYERED = PatternDefinition(
    label="Layered (Standard)",
    directories=(
        "public",
        "src/components",
        "src/hooks",
        "src/services",
        "src/pages",
        "src/store",
        "src/styles",
        "src/utils",
        "src/config",
        *ASSET_DIRECTORIES,
        *_TEST_DIRECTORIES,
        ".github/workflows",
    ),
    files=(
        text_file("src/components/index.ts", "export {};\n"),
        text_file("src/hooks/index.ts", "export {};\n"),
        text_file(
            "src/services/index.ts",
            "// API clients and business logic\nexport {};\n",
        ),
        text_file("src/services/api.ts", _API_TS),
        text_file("src/pages/index.ts", "export {};\n"),
        text_file(
            "src/store/index.ts",
            "// Global state management\n"
            "// Use Redux Toolkit, Zustand, or Context API\n"
            "export {};\n",
        ),
        text_file("src/styles/index.ts", "export {};\n"),
        text_file("src/utils/index.ts", "export {};\n"),
        text_file("src/config/index.ts", _CONFIG_TS),
        *gitkeep_files(ASSET_DIRECTORIES),
        *gitkeep_files(_TEST_DIRECTORIES),
        text_file("tests/setup.ts", _TEST_SETUP_TS),
        text_file(
            "src/types.ts",
            "// Shared app types\nexport type AppType = unknown;\n",
        ),
        app_tsx("React App"),
        main_tsx(),
        json_file(
            "package.json",
            {
                "name": "react-app-layered",
                "version": "0.1.0",
                "private": True,
                "type": "module",
                "scripts": {
                    "dev": "vite",
                    "build": "tsc && vite build",
                    "lint": "eslint . --ext ts,tsx",
                    "preview": "vite preview",
                    "test": "vitest",
                    "test:coverage": "vitest --coverage",
                },
                "dependencies": {
                    "react": "^18.3.1",
                    "react-dom": "^18.3.1",
                    "axios": "^1.6.5",
                },
                "devDependencies": {
                    "@testing-library/jest-dom": "^6.1.5",
                    "@testing-library/react": "^14.1.2",
                    "@testing-library/user-event": "^14.5.1",
                    "@types/react": "^18.3.3",
                    "@types/react-dom": "^18.3.0",
                    "@typescript-eslint/eslint-plugin": "^7.13.1",
                    "@typescript-eslint/parser": "^7.13.1",
                    "@vitejs/plugin-react": "^4.3.1",
                    "@vitest/coverage-v8": "^1.1.0",
                    "eslint": "^8.57.0",
                    "eslint-plugin-react-hooks": "^4.6.2",
                    "eslint-plugin-react-refresh": "^0.4.7",
                    "jsdom": "^23.0.1",
                    "typescript": "^5.2.2",
                    "vite": "^5.3.1",
                    "vitest": "^1.1.0",
                },
            },
        ),
        tsconfig(),
        tsconfig_node(),
        text_file("vite.config.ts", _VITE_CONFIG_TS),
        index_html("React App", description="React application built with Vite"),
        vite_svg(),
        text_file(".gitignore", _GITIGNORE),
        text_file(".env.example", _ENV_EXAMPLE),
        text_file("Dockerfile", _DOCKERFILE),
        text_file("nginx.conf", _NGINX_CONF),
        text_file(".github/workflows/ci.yml", _CI_WORKFLOW),
        text_file("README.md", _README),
    ),
)
