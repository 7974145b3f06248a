"""Basic usage examples for the title fight calculator."""

from titlefight import ChampionshipService, get_contender, sample_roster


def main() -> None:
    service = ChampionshipService(sample_roster())

    print("=== Title contenders ===")
    for c in service.contenders:
        print(f"  {c.name} ({c.team}) - {c.points} pts, {c.wins} wins, {c.podiums} podiums")

    # Manual what-if: Verstappen wins, Piastri second, Norris fourth
    print("\n=== What-if: VER P1, PIA P2, NOR P4 ===")
    outcome = service.simulate({"verstappen": 1, "piastri": 2, "norris": 4})
    for rank, r in enumerate(outcome.standings[:5], start=1):
        print(f"  {rank}. {r.name:<18} {r.final_points:>4} pts (+{r.race_points})")
    if outcome.is_tie:
        print(f"  Tie between {outcome.champion.name} and {outcome.second.name}")
    else:
        print(f"  Champion: {outcome.champion.name}")

    # Raw combinations for the outsider
    piastri = get_contender(service.roster, "piastri")
    scenarios = service.winning_scenarios(piastri.id)
    print(f"\n=== {piastri.name}: {len(scenarios)} winning combinations, e.g. ===")
    for sc in scenarios[:3]:
        print(f"  {sc.as_dict()}")

    # Strategy room: what does each contender need?
    for c in service.contenders:
        print(f"\n=== What {c.name} needs ===")
        groups = service.strategy(c.id)
        if not groups:
            print("  No scenario exists.")
        for group in groups:
            print(f"  If {group.label}: {group.description}")


if __name__ == "__main__":
    main()
