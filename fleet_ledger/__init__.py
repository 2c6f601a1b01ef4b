"""Fleet rental pricing, commission and payment ledger."""
