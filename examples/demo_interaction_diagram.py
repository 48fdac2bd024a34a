"""
N-M Interaction Diagram Quick Demonstration
===========================================

This script demonstrates:
1. Material catalogue (EN 1992-1-1 Table 3.1 / Annex C)
2. Interaction diagram with reinforcement variants
3. Concrete-only diagram
4. Design point search for a target load pair
"""

from nmdiagram import (
    SectionGeometry,
    MaterialLoader,
    DesignPointNotFoundError,
    calculate,
    calculate_concrete_only,
    design_reinforcement,
)


def fmt(value, scale=1.0, spec="10.1f"):
    """Format an optional value, '-' when unavailable."""
    if value is None:
        return f"{'-':>10}"
    return format(value * scale, spec)


def demo_material_catalog():
    """Show available materials."""
    print("\n" + "="*70)
    print("MATERIAL CATALOGUE")
    print("="*70)

    print("\nConcrete grades:")
    for grade in ["C20/25", "C30/37", "C40/50", "C50/60"]:
        c = MaterialLoader.get_concrete(grade)
        print(f"  {grade:7} → fcd = {-c.fcd / 1e6:5.1f} MPa, "
              f"εc2 = {-c.eps_c2 * 1000:.2f}‰, εcu = {-c.eps_cu * 1000:.2f}‰")

    print("\nSteel grades:")
    for grade in MaterialLoader.list_steel_grades():
        s = MaterialLoader.get_steel(grade)
        print(f"  {grade:6} → fyd = {s.fyd / 1e6:5.1f} MPa, εyd = {s.eps_yd * 1000:.3f}‰, "
              f"εud = {s.eps_ud * 1000:.1f}‰")


def demo_interaction_diagram():
    """Interaction diagram for a beam-column section."""
    print("\n" + "="*70)
    print("INTERACTION DIAGRAM")
    print("="*70)

    section = SectionGeometry(b=0.3, h=0.5, layer1_distance=0.05, layer2_y=0.05)
    concrete = MaterialLoader.get_concrete("C30/37")
    steel = MaterialLoader.get_steel("B500B")

    N_Ed = -500e3  # N
    M_Ed = 120e3   # N·m

    print(f"\nSection: {section.b * 1000:.0f}×{section.h * 1000:.0f} mm, "
          f"layers at y1 = {section.y1 * 1000:.0f} mm, y2 = {section.y2 * 1000:.0f} mm")
    print(f"Design load: N_Ed = {N_Ed / 1e3:.0f} kN, M_Ed = {M_Ed / 1e3:.0f} kN·m")

    points = calculate(section, concrete, steel, n_design=N_Ed, m_design=M_Ed,
                       densities=[2, 2, 2, 4, 4, 2, 2, 2])

    print(f"\n{'Point':>14} {'εtop‰':>7} {'εbot‰':>7} {'N kN':>10} {'M kNm':>10} "
          f"{'As1 mm²':>10} {'As2 mm²':>10}")
    for p in points:
        print(f"{p.label:>14} {p.eps_top * 1000:7.2f} {p.eps_bottom * 1000:7.2f} "
              f"{fmt(p.n_total, 1e-3)} {fmt(p.m_total, 1e-3)} "
              f"{fmt(p.optimal.as1, 1e6)} {fmt(p.optimal.as2, 1e6)}")


def demo_concrete_only():
    """Concrete resultant without reinforcement."""
    print("\n" + "="*70)
    print("CONCRETE-ONLY DIAGRAM")
    print("="*70)

    section = SectionGeometry(b=0.3, h=0.5)
    concrete = MaterialLoader.get_concrete("C30/37")
    steel = MaterialLoader.get_steel("B500B")

    points = calculate_concrete_only(section, concrete, steel, densities=[1] * 8)
    for p in points:
        print(f"  {p.label:3} → N = {p.n / 1e3:9.1f} kN, M = {p.m / 1e3:8.2f} kN·m")


def demo_design_point():
    """Find reinforcement for a target load pair."""
    print("\n" + "="*70)
    print("DESIGN POINT SEARCH")
    print("="*70)

    section = SectionGeometry(b=0.3, h=0.5, layer1_distance=0.05, layer2_y=0.05)
    concrete = MaterialLoader.get_concrete("C30/37")
    steel = MaterialLoader.get_steel("B500B")

    for N_Ed, M_Ed in [(0.0, 30e3), (0.0, 150e3), (0.0, 2e6)]:
        print(f"\nTarget: N = {N_Ed / 1e3:.0f} kN, M = {M_Ed / 1e3:.0f} kN·m")
        try:
            result = design_reinforcement(section, concrete, steel, N_Ed, M_Ed)
        except DesignPointNotFoundError as e:
            print(f"  ❌ {e}")
            continue

        p = result.point
        print(f"  {result.label}")
        print(f"  εtop = {p.eps_top * 1000:.3f}‰, εbot = {p.eps_bottom * 1000:.3f}‰")
        print(f"  M = {p.m_total / 1e3:.2f} kN·m (error {result.error_rel:.3%})")
        print(f"  As (single layer) = {fmt(p.single_layer.as2, 1e6, '.0f')} mm²")


if __name__ == "__main__":
    print("\n" + "="*70)
    print("N-M INTERACTION DIAGRAM DEMO (EN 1992-1-1:2004)")
    print("="*70)

    demo_material_catalog()
    demo_interaction_diagram()
    demo_concrete_only()
    demo_design_point()

    print("\n" + "="*70)
    print("DEMO COMPLETE")
    print("="*70)
    print()
