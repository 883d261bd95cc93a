"""
Reset the bubble timer history.
This deletes every stored timer session.
"""

from BackEnd.core.paths import store_path
from BackEnd.repos.kv_store import JsonFileStore
from BackEnd.repos.history_repo import HistoryStore

def reset_history():
    """Clear the stored session history after confirmation."""
    path = store_path()
    history = HistoryStore(JsonFileStore(path))
    history.load()

    if not len(history):
        print("No history found. Nothing to reset.")
        return

    print(f"Found {len(history)} sessions in: {path}")
    confirm = input("Are you sure you want to clear the timer history? This cannot be undone. (yes/no): ")

    if confirm.lower() in ['yes', 'y']:
        if history.clear():
            print("✓ History cleared successfully!")
        else:
            print("✗ Could not remove the stored history (see log output).")
    else:
        print("Reset cancelled.")

if __name__ == "__main__":
    print("=" * 50)
    print("Bubble Timer - Reset History")
    print("=" * 50)
    reset_history()
