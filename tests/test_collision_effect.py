from gravity_sandbox.effects import CollisionEffectState, EffectPhase
from gravity_sandbox.simulation import GravitySimulation


def test_state_machine_transitions():
    fx = CollisionEffectState()
    assert fx.phase is EffectPhase.IDLE
    assert not fx.expire(10_000.0, 105.0)

    assert fx.trigger(1.0, 2.0, now=100.0) is True
    assert fx.phase is EffectPhase.ACTIVE

    # overwrite while active: last writer wins, not a new start
    assert fx.trigger(-3.0, 4.0, now=150.0) is False
    assert (fx.x, fx.y, fx.start_time) == (-3.0, 4.0, 150.0)

    assert not fx.expire(255.0, 105.0)  # exactly the duration
    assert fx.active
    assert fx.expire(255.5, 105.0)
    assert fx.phase is EffectPhase.IDLE
    assert not fx.expire(1000.0, 105.0)


def test_effect_expires_during_step(clock, still_config):
    sim = GravitySimulation(config=still_config, clock=clock)
    sim.add_body(1.0, 0.0, 0.0, 0.0)
    sim.remove_out_of_range(100.0, 100.0)
    assert sim.has_active_collision_effect()

    clock.advance(100)
    sim.step()
    assert sim.has_active_collision_effect()

    clock.advance(10)
    sim.step()  # no bodies left, expiry is still checked
    assert not sim.has_active_collision_effect()


def test_last_collision_in_a_pass_wins(clock, still_config):
    sim = GravitySimulation(config=still_config, clock=clock)
    sim.add_body(1.0, 0.0, 0.0, 0.0)
    sim.add_body(0.0, 2.0, 0.0, 0.0)

    sim.remove_out_of_range(100.0, 100.0)

    # visited newest first, so the older body is recorded last
    assert (sim.get_collision_effect_x(), sim.get_collision_effect_y()) == (1.0, 0.0)


def test_collision_effect_copy_is_detached(clock, still_config):
    sim = GravitySimulation(config=still_config, clock=clock)
    sim.add_body(1.0, 0.0, 0.0, 0.0)
    sim.remove_out_of_range(100.0, 100.0)

    fx = sim.collision_effect
    fx.active = False
    assert sim.has_active_collision_effect()
