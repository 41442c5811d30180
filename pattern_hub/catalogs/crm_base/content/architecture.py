MODULAR_FORMS_SYSTEM = """# Modular Forms System

Large forms are split into independent sections that share one form context.

## Layout

```
features/<entity>/forms/
  schema.ts            # One zod schema per section, merged at the root
  sections/
    general-section.tsx
    contact-section.tsx
  <entity>-form.tsx    # Composes sections, owns submit
```

## Rules

- A section receives `control` and renders its own fields only
- Validation lives in the schema, never in section components
- Section order and visibility come from a config array, not JSX conditionals
- Multi-step forms reuse the same sections; steps are just groupings

## Root Form

```tsx
const form = useForm<EntityForm>({ resolver: zodResolver(entitySchema) });

return (
  <Form {...form}>
    {sections.map(Section => <Section key={Section.id} control={form.control} />)}
  </Form>
);
```
"""

FEATURE_BASED_ORGANIZATION = """# Feature-Based Organization

Code is grouped by business feature instead of by technical layer.

```
src/
  features/
    clients/
      api/          # Server actions and fetchers
      components/   # Feature-only UI
      hooks/
      types.ts
    requests/
  components/ui/    # Shared primitives (shadcn/ui)
  lib/              # Cross-feature utilities
```

## Guidelines

- A feature may import from `components/ui` and `lib`, never from another feature
- Shared logic used by two features moves to `lib`
- Each feature exposes a small `index.ts` public surface
- Route files under `app/` stay thin and delegate to feature components
"""
