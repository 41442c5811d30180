DIALOG_PATTERNS = """# Dialog Patterns - Unified Design System

Two dialog types cover every use case:

1. **Form dialogs** - user input, approvals and data submission
2. **Details dialogs** - read-only detail views with optional actions

## Form Dialog Requirements

- No redundant titles that repeat the page heading
- No asterisks on required field labels; validation messages carry that information
- Use `space-y-4` for the main container
- Content boxes use `bg-card rounded-lg border p-4`
- No `DialogDescription` block

## Form Dialog Template

```tsx
export function StandardFormModal({ isOpen, onClose, entityId }: StandardModalProps) {
  const t = useTranslations('SectionName');
  const [isLoading, setIsLoading] = useState(false);

  return (
    <Dialog open={isOpen} onOpenChange={onClose}>
      <DialogContent className="sm:max-w-[600px]">
        <DialogHeader>
          <DialogTitle>{t('dialogTitle')}</DialogTitle>
        </DialogHeader>
        <div className="space-y-4">
          <div className="bg-card rounded-lg border p-4">{/* fields */}</div>
        </div>
        <DialogFooter>
          <Button variant="outline" onClick={onClose}>{t('cancel')}</Button>
          <Button disabled={isLoading}>{t('confirm')}</Button>
        </DialogFooter>
      </DialogContent>
    </Dialog>
  );
}
```

## Details Dialog Rules

- Group related fields in labelled sections
- Actions live in the footer, destructive actions last
- Long content scrolls inside `DialogContent`, never the page
"""

CONFIGURATION_TABS_PATTERN = """# Configuration Tabs Pattern

Configuration pages group related settings into tabs. Each tab owns one
entity type and renders the same table + dialog layout.

## Structure

```
app/[locale]/configuration/
  page.tsx            # Tabs shell, reads ?tab= from the URL
  _components/
    tabs-config.ts    # Tab ids, labels, permissions
    <entity>-tab.tsx  # One component per tab
```

## Requirements

- The active tab is stored in the URL so it survives reloads
- Tabs the user cannot access are hidden, not disabled
- Each tab lazy-loads its data when first shown
- Create and edit use the unified form dialog (crm-base://ui-system/dialog-patterns)

## Styling

```tsx
<TabsList className="grid w-full grid-cols-4">
  {tabs.map(tab => <TabsTrigger key={tab.id} value={tab.id}>{t(tab.label)}</TabsTrigger>)}
</TabsList>
```
"""
