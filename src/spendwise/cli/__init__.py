"""
Command Line Interface Package

Unified CLI for spendwise.

Command Structure:
- spendwise: Main entry point with utility commands (version, config)
- spendwise transactions: record, list, history, delete
- spendwise subscriptions: add, list (runs the expiry sweep), toggle, delete
- spendwise budget: set, status
- spendwise report: trend, categories, summary
- spendwise wallet: show, top-up
"""
