import pytest

from flappy.constants import GRAVITY, JUMP_STRENGTH
from flappy.data_models import Bird, Pipe
from flappy.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def test_single_frame_fall_from_rest(core):
    bird = Bird(x=160, y=240, velocity=0)
    core.step_bird(bird, jump=False)
    assert bird.velocity == 0.25
    assert bird.y == 240.25


def test_scripted_fall_displacement(core):
    bird = Bird(x=160, y=240, velocity=0)
    ys, vs = [], []
    for _ in range(4):
        core.step_bird(bird, jump=False)
        ys.append(bird.y)
        vs.append(bird.velocity)
    assert vs == [0.25, 0.5, 0.75, 1.0]
    assert ys == [240.25, 240.75, 241.5, 242.5]


def test_velocity_grows_by_gravity_each_frame(core):
    bird = Bird(velocity=-3.0)
    for _ in range(30):
        before = bird.velocity
        core.step_bird(bird, jump=False)
        assert bird.velocity - before == pytest.approx(GRAVITY)


def test_jump_overwrites_velocity_before_gravity(core):
    bird = Bird(x=160, y=240, velocity=3.0)
    core.step_bird(bird, jump=True)
    assert bird.velocity == JUMP_STRENGTH + GRAVITY == -4.75
    assert bird.y == 235.25


def test_holding_jump_pins_velocity(core):
    bird = Bird(x=160, y=240, velocity=0)
    for i in range(1, 4):
        core.step_bird(bird, jump=True)
        assert bird.velocity == -4.75
        assert bird.y == 240 - 4.75 * i


@pytest.mark.parametrize("y, out", [
    (0.0, False),
    (460.0, False),
    (460.25, True),
    (-0.5, True),
    (240.0, False),
])
def test_out_of_bounds(core, y, out):
    assert core.is_out_of_bounds(Bird(y=y)) is out


@pytest.mark.parametrize("bird_y, hit", [
    (250.0, False),    # inside the gap
    (200.0, False),    # touching the top stub
    (300.0, False),    # touching the bottom stub
    (199.0, True),     # into the top stub
    (301.0, True),     # into the bottom stub
])
def test_hits_pipe_when_overlapping(core, bird_y, hit):
    bird = Bird(x=100, y=bird_y)
    pipe = Pipe(x=90, gap_y=200)
    assert core.hits_pipe(bird, pipe) is hit


def test_no_hit_without_horizontal_overlap(core):
    bird = Bird(x=100, y=10)
    assert not core.hits_pipe(bird, Pipe(x=120, gap_y=200))
    assert not core.hits_pipe(bird, Pipe(x=50, gap_y=200))


def test_check_collision_any_pipe(core):
    bird = Bird(x=100, y=250)
    pipes = [Pipe(x=400, gap_y=60), Pipe(x=90, gap_y=200)]
    assert not core.check_collision(bird, pipes)

    pipes.append(Pipe(x=95, gap_y=60))
    assert core.check_collision(bird, pipes)


def test_check_collision_bounds_without_pipes(core):
    assert core.check_collision(Bird(y=470.25), [])
    assert not core.check_collision(Bird(y=240), [])
