from core.orchestrator import Orchestrator
from os_controller.tk_host import TkFrameHost


def run_demo(frames: int = 2, orchestrator: Orchestrator | None = None) -> None:
    print("Starting frame-restore demo...")
    if not TkFrameHost.display_available():
        print("No display available; nothing to show.")
        return

    host = TkFrameHost(title="frame-restore demo")
    bundle = (orchestrator or Orchestrator()).build(host)
    print(f"Snapshot file: {bundle.store.path}")

    host.show()
    if bundle.coordinator.state.state.primary_applied:
        print("Restored frames from the last session.")
    else:
        print(f"Cold start: opening {frames} frame(s).")
        for index in range(1, frames):
            host.create_frame({"left": 80 + 40 * index, "top": 80 + 40 * index, "width": 420, "height": 300})

    print("Move or resize the frames, then close the main frame to save them.")
    host.run()
    print(f"Demo complete. Saved {bundle.coordinator.state.state.last_capture_count or 0} frame(s).")


if __name__ == "__main__":
    run_demo()
