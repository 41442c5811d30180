TYPESCRIPT_EXCELLENCE = """# TypeScript Excellence

## Compiler Settings

```json
{
  "compilerOptions": {
    "strict": true,
    "noUncheckedIndexedAccess": true,
    "noImplicitOverride": true
  }
}
```

## Patterns

- Derive form types from schemas: `type ClientForm = z.infer<typeof clientSchema>`
- Model API states as discriminated unions instead of boolean flags
- Prefer `satisfies` for config objects so literal types are kept
- No `any`; use `unknown` and narrow

## Discriminated Union Example

```ts
type LoadState<T> =
  | { status: 'idle' }
  | { status: 'loading' }
  | { status: 'success'; data: T }
  | { status: 'error'; error: string };
```
"""
