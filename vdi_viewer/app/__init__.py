"""QML-facing application facade and state objects.

This package implements the QML↔Python boundary:
- Query slots returning values (launch config, folder listing, navigation, appearance)
- Single command entry for stateful UI actions: backend.dispatch(cmd, payload)
- UI binding via state QObjects (backend.viewer / backend.settings)
- Python→QML notifications via backend.event
"""
