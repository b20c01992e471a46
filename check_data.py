import sys

from content.store import ContentStore
from settings import get_settings

store = ContentStore(get_settings().data_dir)

print("=== DATA CHECK ===")
print(f"  States: {len(store.list_states())}")
print(f"  Cities: {len(store.list_cities())}")
print(f"  Feedback entries: {len(store.list_feedback())}")

problems = store.check_references()
if problems:
    print(f"\n✗ {len(problems)} problem(s) found")
    for problem in problems:
        print(f"  {problem}")
    sys.exit(1)

print("\n✓ All references resolve")
