"""
Pytest configuration for provider_config. Clear OAUTH_* env so ProviderSettings defaults apply.
"""
import os

for _var in [v for v in os.environ if v.startswith("OAUTH_")]:
    del os.environ[_var]
