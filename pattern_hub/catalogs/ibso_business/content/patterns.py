CLIENT_PROJECT_STRUCTURE = """# Client Project Structure

Every business unit project starts from crm-base and adds a client layer.

```
<client>-erp/
  src/
    features/          # Client business modules
    config/client.ts   # Branding, locales, enabled modules
  docs/
    README-<client>.md # Published through ibso-business://readme/<client>
```

- Base patterns are consumed, not copied; overrides live under `features/`
- Client terminology goes into translation files, never into component code
"""
