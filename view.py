import asyncio, threading, pyglet, typing, pocketcube

STICKER_SIZE = 48
STICKER_GAP = 3
MARGIN = 24

COLOR_RGBS = {
    pocketcube.Color.WHITE: (255, 255, 255),
    pocketcube.Color.YELLOW: (255, 213, 0),
    pocketcube.Color.RED: (185, 0, 0),
    pocketcube.Color.GREEN: (0, 155, 72),
    pocketcube.Color.BLUE: (0, 69, 173),
    pocketcube.Color.ORANGE: (255, 89, 0)
}

#Top-left cell of each face in the cross net, in sticker units
NET_ORIGINS = {
    pocketcube.Face.U: (2, 0),
    pocketcube.Face.L: (0, 2),
    pocketcube.Face.F: (2, 2),
    pocketcube.Face.R: (4, 2),
    pocketcube.Face.B: (6, 2),
    pocketcube.Face.D: (2, 4)
}
NET_COLS, NET_ROWS = 8, 6

TURN_KEYS = {
    pyglet.window.key.U: pocketcube.Turn.U,
    pyglet.window.key.L: pocketcube.Turn.L,
    pyglet.window.key.F: pocketcube.Turn.F,
    pyglet.window.key.R: pocketcube.Turn.R,
    pyglet.window.key.B: pocketcube.Turn.B,
    pyglet.window.key.D: pocketcube.Turn.D
}

class NetView:
    batch: pyglet.graphics.Batch
    stickers: typing.Dict[pocketcube.Face, typing.List[pyglet.shapes.Rectangle]]

    def __init__(self):
        self.batch = pyglet.graphics.Batch()
        self.stickers = {}

        #Create one rectangle per cubie, row-major per face
        for face, (ox, oy) in NET_ORIGINS.items():
            rects = []
            for row in range(2):
                for col in range(2):
                    x = MARGIN + (ox + col) * STICKER_SIZE
                    y = MARGIN + (NET_ROWS - 1 - (oy + row)) * STICKER_SIZE
                    rects.append(pyglet.shapes.Rectangle(x, y, STICKER_SIZE - STICKER_GAP, STICKER_SIZE - STICKER_GAP, color=COLOR_RGBS[face.color], batch=self.batch))
            self.stickers[face] = rects

    def update_state(self, state: pocketcube.CubeState):
        for face, rects in self.stickers.items():
            for rect, color in zip(rects, state.face_colors(face)): rect.color = COLOR_RGBS[color]

    def draw(self): self.batch.draw()

class CubeView(pyglet.window.Window):
    net: NetView

    _lock: threading.Lock
    _should_close: bool
    _new_state: pocketcube.CubeState
    _turn_cb: typing.Optional[typing.Callable[[pocketcube.Turn], None]]

    def __init__(self, turn_cb: typing.Optional[typing.Callable[[pocketcube.Turn], None]] = None):
        super().__init__(2*MARGIN + NET_COLS*STICKER_SIZE, 2*MARGIN + NET_ROWS*STICKER_SIZE, caption="Pocket Cube View")
        self.set_vsync(True)

        self._lock = threading.Lock()
        self._should_close = False
        self._new_state = None
        self._turn_cb = turn_cb

        pyglet.gl.glClearColor(0.9, 0.9, 0.9, 1)
        self.net = NetView()

    #Called from any thread; the state is copied and picked up by the render loop
    def update_state(self, state: pocketcube.CubeState):
        with self._lock: self._new_state = state.copy()

    def on_draw(self, dt):
        with self._lock:
            if self._new_state is not None:
                self.net.update_state(self._new_state)
                self._new_state = None

        self.clear()
        self.net.draw()

    def on_key_press(self, symbol, modifiers):
        if symbol not in TURN_KEYS or not self._turn_cb: return

        #Shift turns the face counterclockwise
        turn = TURN_KEYS[symbol]
        if modifiers & pyglet.window.key.MOD_SHIFT: turn = turn.inverse
        self._turn_cb(turn)

    def run(self):
        while not self.has_exit:
            with self._lock:
                if self._should_close: break

            dt = pyglet.clock.tick()
            self.dispatch_events()
            self.dispatch_event('on_draw', dt)
            self.flip()

        self.close()

    @staticmethod
    def run_thread(turn_cb: typing.Optional[typing.Callable[[pocketcube.Turn], None]] = None, exit_cb: typing.Optional[typing.Callable] = None) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        fut = loop.create_future()

        def thread_fnc():
            #Key presses arrive on the view thread, hand them over to the event loop
            view = CubeView((lambda t: loop.call_soon_threadsafe(turn_cb, t)) if turn_cb else None)
            loop.call_soon_threadsafe(lambda: fut.set_result((view, threading.current_thread())))
            view.run()
            if exit_cb and loop.is_running(): loop.call_soon_threadsafe(exit_cb)

        threading.Thread(target=thread_fnc, daemon=True).start()

        return fut

    def close_threadsafe(self):
        with self._lock: self._should_close = True

if __name__ == '__main__':
    view = CubeView()
    view.update_state(pocketcube.CubeState.solved())
    view.run()
