PROJECT_STRUCTURE = """# Standard Project Structure

```
client-project/
  apps/
    web/              # Next.js front end
    api/              # Backend service
  packages/
    ui/               # Shared components
    config/           # ESLint, TypeScript, Tailwind presets
  infra/              # Infrastructure as code
  docs/
    architecture.md
    runbook.md
  .github/workflows/  # CI/CD
```

## Conventions
- One `README.md` per app with local setup steps
- Environment variables documented in `.env.example`, never committed
- `main` is always deployable; feature work happens on short-lived branches
"""
