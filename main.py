"""
main.py — Bootstrap

1. Load tuning
2. Create the app
3. Create the session (best score from disk)
4. Hook up sound cues
5. Push the menu scene
6. Run
"""

from core import tuning
from core.app import App
from core.constants import SCREEN_W, SCREEN_H, TITLE
from core.save import JsonScoreStore
from logic.audio import AudioCues
from logic.session import Session
from scenes.menu_scene import MenuScene


def main():
    tuning.load()
    app = App(title=TITLE, width=SCREEN_W, height=SCREEN_H)

    store = JsonScoreStore()
    session = Session(width=SCREEN_W, height=SCREEN_H, store=store)
    print(f"[MAIN] Best score {session.best_score} from {store.path}")

    # Kept alive by the bus subscriptions.
    AudioCues(session.bus, is_muted=lambda: session.muted)

    app.push_scene(MenuScene(session))
    app.run()


if __name__ == "__main__":
    main()
