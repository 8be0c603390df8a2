"""
ScopeGen - Built-in Catalog Data

National-average base pricing, durations and scope text for every trade
and job type the proposal generator offers, plus the list of home areas
each trade can be applied to.
"""

from .catalog import (
    BooleanOption,
    Choice,
    ChoiceOption,
    FootageBilling,
    JobType,
    Trade,
    job_types,
)


# ==================== AREA GROUPS ====================

INTERIOR_AREAS = (
    "living-room", "dining-room", "bedroom", "master-bedroom", "hallway",
    "home-office", "closet", "mudroom", "laundry-room", "basement", "attic",
    "whole-house",
)

BATHROOM_AREAS = ("bathroom", "master-bathroom", "half-bath", "guest-bathroom")

KITCHEN_AREAS = ("kitchen", "kitchenette", "outdoor-kitchen")

EXTERIOR_AREAS = (
    "front-yard", "backyard", "side-yard", "patio", "deck", "driveway",
    "walkway", "garage", "carport", "exterior-full",
)

ROOFING_AREAS = ("main-roof", "garage-roof", "porch-roof", "addition-roof", "full-roof")

PLUMBING_AREAS = BATHROOM_AREAS + KITCHEN_AREAS + (
    "laundry-room", "basement", "garage", "whole-house",
)

ELECTRICAL_AREAS = BATHROOM_AREAS + KITCHEN_AREAS + (
    "laundry-room", "basement", "garage", "attic", "living-room",
    "dining-room", "bedroom", "master-bedroom", "home-office", "whole-house",
)

DEFAULT_AREA_KEYS = INTERIOR_AREAS + EXTERIOR_AREAS

TRADE_AREA_KEYS = {
    "bathroom": BATHROOM_AREAS,
    "kitchen": KITCHEN_AREAS,
    "painting": INTERIOR_AREAS + EXTERIOR_AREAS,
    "flooring": INTERIOR_AREAS,
    "drywall": INTERIOR_AREAS,
    "roofing": ROOFING_AREAS,
    "concrete": EXTERIOR_AREAS,
    "landscape": EXTERIOR_AREAS,
    "plumbing": PLUMBING_AREAS,
    "electrical": ELECTRICAL_AREAS,
    "hvac": INTERIOR_AREAS + ("garage",),
    "handyman": INTERIOR_AREAS + EXTERIOR_AREAS,
    "windows-doors": tuple(
        a for a in INTERIOR_AREAS if a not in ("whole-house", "closet", "laundry-room")
    ) + ("patio", "garage"),
    "fencing": ("front-yard", "backyard", "side-yard"),
    "decks-patios": ("deck", "patio", "backyard", "front-yard"),
}


# ==================== TRADES ====================

_STANDARD_WARRANTY = "1-year labor warranty on all workmanship."

TRADES = {
    "bathroom": Trade(
        id="bathroom",
        name="Bathroom",
        materials_ratio=0.45,
        labor_ratio=0.55,
        job_types=job_types(
            JobType(
                id="bathroom-remodel",
                name="Bathroom Remodel",
                base_price_low=12000,
                base_price_high=25000,
                days_low=7,
                days_high=14,
                warranty=_STANDARD_WARRANTY,
                exclusions=("Structural modifications", "Plumbing rerouting beyond fixture locations"),
                base_scope=(
                    "Complete assessment of existing bathroom layout and condition.",
                    "Demolition of existing fixtures, flooring, and wall finishes as needed.",
                    "Install new vanity cabinet with countertop and sink.",
                    "Install new toilet with wax ring seal and supply line.",
                    "Install new tub/shower system per plan specifications.",
                    "Install tile flooring with proper waterproofing.",
                    "Paint walls and ceiling with moisture-resistant paint.",
                    "Install new light fixtures and exhaust fan.",
                    "Final cleanup and walkthrough with homeowner.",
                ),
                options=(
                    BooleanOption(
                        id="heated-floor",
                        label="Heated floor system",
                        price_delta=1800,
                        scope_addition="Install electric radiant heating mat beneath tile floor with programmable thermostat."
                    ),
                    BooleanOption(
                        id="niche",
                        label="Recessed shower niche",
                        price_delta=450,
                        scope_addition="Frame, waterproof and tile recessed shower niche."
                    ),
                    ChoiceOption(
                        id="tile-grade",
                        label="Tile grade",
                        choices=(
                            Choice("standard", "Standard ceramic"),
                            Choice(
                                "porcelain", "Large-format porcelain", 1500,
                                "Upgrade wall and floor tile to large-format porcelain."
                            ),
                            Choice(
                                "natural-stone", "Natural stone", 3500,
                                "Install natural stone tile with sealed finish."
                            ),
                        )
                    ),
                )
            ),
            JobType(
                id="shower-replacement",
                name="Shower Replacement",
                base_price_low=4500,
                base_price_high=9000,
                days_low=3,
                days_high=5,
                warranty="1-year labor warranty.",
                exclusions=("Hidden water damage repair", "Plumbing modifications"),
                base_scope=(
                    "Remove existing shower/tub surround.",
                    "Inspect and repair any water damage.",
                    "Install new shower base or pan.",
                    "Install waterproof membrane system.",
                    "Install new shower walls (tile or prefab surround).",
                    "Install new shower valve and fixtures.",
                    "Install shower door or curtain rod.",
                    "Caulk all seams and transitions.",
                    "Final cleanup and debris removal.",
                ),
                options=(
                    ChoiceOption(
                        id="enclosure",
                        label="Shower enclosure",
                        choices=(
                            Choice("curtain", "Curtain rod"),
                            Choice(
                                "framed-glass", "Framed glass door", 600,
                                "Install framed glass shower door."
                            ),
                            Choice(
                                "frameless-glass", "Frameless glass door", 1400,
                                "Install frameless tempered glass shower enclosure."
                            ),
                        )
                    ),
                    BooleanOption(
                        id="grab-bars",
                        label="Safety grab bars",
                        price_delta=250,
                        scope_addition="Install blocking and two ADA-rated grab bars."
                    ),
                )
            ),
            JobType(
                id="tub-to-shower",
                name="Tub to Shower Conversion",
                base_price_low=8500,
                base_price_high=12000,
                days_low=5,
                days_high=8,
                warranty=_STANDARD_WARRANTY,
                exclusions=(
                    "Hidden water damage",
                    "Electrical upgrades beyond existing",
                    "Drain relocation may be required",
                ),
                base_scope=(
                    "Demolish existing bathtub and surround.",
                    "Dispose of all debris off-site.",
                    "Inspect framing and plumbing for damage.",
                    "Install new shower pan with proper slope.",
                    "Install waterproof backer board on walls.",
                    "Apply waterproof membrane to wet areas.",
                    "Install new shower valve and trim.",
                    "Install wall finish per selected system type.",
                    "Install shower door and fixtures.",
                    "Caulk all corners with mildew-resistant silicone.",
                )
            ),
            JobType(
                id="walk-in-tub",
                name="Walk-In Tub Installation",
                base_price_low=8000,
                base_price_high=15000,
                days_low=3,
                days_high=5,
                warranty="2-year labor warranty. Manufacturer warranty on tub components.",
                exclusions=("Subfloor repair beyond minor repairs", "Panel upgrades", "Water heater replacement"),
                base_scope=(
                    "Protect floors and adjacent areas.",
                    "Remove existing bathtub and surround.",
                    "Install walk-in tub unit; level and secure.",
                    "Connect all plumbing and electrical components.",
                    "Test door seal, leaks, and all functions.",
                    "Final cleanup and homeowner walkthrough.",
                ),
                options=(
                    BooleanOption(
                        id="hydrotherapy-jets",
                        label="Hydrotherapy jets",
                        price_delta=1200,
                        scope_addition="Install dedicated GFCI circuit for hydrotherapy jets and inline heater."
                    ),
                )
            ),
        )
    ),
    "kitchen": Trade(
        id="kitchen",
        name="Kitchen",
        materials_ratio=0.50,
        labor_ratio=0.50,
        job_types=job_types(
            JobType(
                id="kitchen-remodel",
                name="Kitchen Remodel",
                base_price_low=25000,
                base_price_high=55000,
                days_low=10,
                days_high=21,
                warranty="2-year labor warranty.",
                exclusions=("Appliance costs", "Structural modifications", "Electrical panel upgrades"),
                base_scope=(
                    "Complete demolition of existing cabinets and countertops.",
                    "Remove existing flooring and backsplash.",
                    "Install new base and wall cabinets.",
                    "Install new countertops.",
                    "Install new kitchen sink and faucet.",
                    "Connect existing appliances.",
                    "Install tile backsplash.",
                    "Install new flooring.",
                    "Paint walls and ceiling.",
                    "Install under-cabinet lighting.",
                    "Final cleanup and walkthrough.",
                ),
                options=(
                    ChoiceOption(
                        id="countertop",
                        label="Countertop material",
                        choices=(
                            Choice("laminate", "Laminate"),
                            Choice("quartz", "Quartz", 4500, "Fabricate and install quartz countertops with undermount sink cutout."),
                            Choice("granite", "Granite", 3800, "Fabricate and install granite countertops with sealed finish."),
                        )
                    ),
                    BooleanOption(
                        id="island",
                        label="Add kitchen island",
                        price_delta=6500,
                        scope_addition="Build and install kitchen island with matching cabinetry and countertop."
                    ),
                    BooleanOption(
                        id="pot-filler",
                        label="Pot filler faucet",
                        price_delta=900,
                        scope_addition="Run water supply and install wall-mounted pot filler above range."
                    ),
                )
            ),
            JobType(
                id="cabinet-refacing",
                name="Cabinet Refacing",
                base_price_low=8000,
                base_price_high=15000,
                days_low=3,
                days_high=5,
                warranty="5-year warranty on refacing materials.",
                exclusions=("Cabinet box replacement", "Layout changes"),
                base_scope=(
                    "Remove all cabinet doors, drawer fronts, and hardware.",
                    "Clean and prepare cabinet boxes.",
                    "Apply new veneer or laminate to cabinet frames.",
                    "Install new doors and drawer fronts.",
                    "Install new hinges and drawer slides.",
                    "Install new hardware (handles/knobs).",
                    "Touch up and adjust all doors.",
                    "Final cleanup.",
                ),
                options=(
                    BooleanOption(
                        id="soft-close",
                        label="Soft-close hinges and slides",
                        price_delta=700,
                        scope_addition="Upgrade all hinges and drawer slides to soft-close hardware."
                    ),
                )
            ),
            JobType(
                id="countertop-replacement",
                name="Countertop Replacement",
                base_price_low=3500,
                base_price_high=8000,
                days_low=1,
                days_high=3,
                warranty="Manufacturer warranty on materials.",
                exclusions=("Sink/faucet replacement", "Backsplash work"),
                base_scope=(
                    "Template existing countertop layout.",
                    "Remove and dispose of existing countertops.",
                    "Install new countertops with seams and edges finished.",
                    "Reconnect sink and faucet.",
                    "Final cleanup.",
                )
            ),
        )
    ),
    "painting": Trade(
        id="painting",
        name="Painting",
        materials_ratio=0.25,
        labor_ratio=0.75,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="interior-painting",
                name="Interior Painting",
                base_price_low=2000,
                base_price_high=8000,
                days_low=2,
                days_high=5,
                warranty="2-year warranty on workmanship.",
                exclusions=("Lead paint abatement", "Wallpaper removal", "Extensive repairs"),
                base_scope=(
                    "Protect floors and furnishings with drop cloths.",
                    "Patch minor holes and cracks in walls.",
                    "Sand and prime repaired areas.",
                    "Apply two coats of premium paint to walls.",
                    "Paint trim and doors as specified.",
                    "Final cleanup and touch-ups.",
                ),
                options=(
                    BooleanOption(
                        id="ceilings",
                        label="Include ceilings",
                        price_delta=600,
                        scope_addition="Apply two coats of flat ceiling paint to all ceilings in work area."
                    ),
                    ChoiceOption(
                        id="paint-grade",
                        label="Paint grade",
                        choices=(
                            Choice("standard", "Standard"),
                            Choice("premium", "Premium", 350, "Use premium low-VOC paint with scrub-resistant finish."),
                        )
                    ),
                )
            ),
            JobType(
                id="exterior-painting",
                name="Exterior House Painting",
                base_price_low=4000,
                base_price_high=12000,
                days_low=5,
                days_high=10,
                warranty="2-year warranty on workmanship.",
                exclusions=("Lead paint abatement", "Wood rot replacement"),
                base_scope=(
                    "Pressure wash all exterior surfaces.",
                    "Scrape and sand loose paint.",
                    "Caulk gaps around windows and trim.",
                    "Prime bare wood and repaired areas.",
                    "Apply two coats of exterior paint.",
                    "Final cleanup and walkthrough.",
                )
            ),
            JobType(
                id="cabinet-painting",
                name="Cabinet Painting",
                base_price_low=2500,
                base_price_high=6000,
                days_low=5,
                days_high=10,
                warranty="2-year warranty on workmanship.",
                exclusions=("Cabinet repairs", "Hardware replacement"),
                base_scope=(
                    "Remove doors, drawers and hardware.",
                    "Degrease and sand all cabinet surfaces.",
                    "Apply bonding primer.",
                    "Spray two coats of cabinet enamel.",
                    "Reinstall doors, drawers and hardware.",
                )
            ),
        )
    ),
    "flooring": Trade(
        id="flooring",
        name="Flooring",
        materials_ratio=0.50,
        labor_ratio=0.50,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="flooring-installation",
                name="Flooring Installation",
                base_price_low=3000,
                base_price_high=10000,
                days_low=2,
                days_high=5,
                warranty="Manufacturer warranty on materials. 1-year labor warranty.",
                exclusions=("Furniture moving (large items)", "Subfloor replacement"),
                base_scope=(
                    "Remove and dispose of existing flooring.",
                    "Inspect and level subfloor as needed.",
                    "Install underlayment.",
                    "Install new flooring per manufacturer specifications.",
                    "Install transitions and baseboards.",
                    "Final cleanup.",
                ),
                options=(
                    ChoiceOption(
                        id="material",
                        label="Flooring material",
                        choices=(
                            Choice("lvp", "Luxury vinyl plank"),
                            Choice("hardwood", "Hardwood", 2500, "Install site-acclimated solid hardwood flooring."),
                            Choice("tile", "Tile", 1800, "Install porcelain floor tile with cement backer board."),
                        )
                    ),
                    BooleanOption(
                        id="new-baseboards",
                        label="New baseboards",
                        price_delta=650,
                        scope_addition="Install new painted baseboards throughout work area."
                    ),
                )
            ),
            JobType(
                id="hardwood-refinishing",
                name="Hardwood Refinishing",
                base_price_low=2000,
                base_price_high=5000,
                days_low=3,
                days_high=5,
                warranty="1-year labor warranty.",
                exclusions=("Board replacement", "Furniture moving (large items)"),
                base_scope=(
                    "Sand existing hardwood to bare wood.",
                    "Fill gaps and minor imperfections.",
                    "Apply stain if selected.",
                    "Apply three coats of polyurethane finish.",
                )
            ),
        )
    ),
    "drywall": Trade(
        id="drywall",
        name="Drywall",
        materials_ratio=0.30,
        labor_ratio=0.70,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="full-room-drywall",
                name="Full Room Drywall",
                base_price_low=1500,
                base_price_high=4000,
                days_low=3,
                days_high=5,
                warranty=_STANDARD_WARRANTY,
                exclusions=("Framing repairs", "Painting"),
                base_scope=(
                    "Hang new drywall sheets on walls and ceiling.",
                    "Tape and mud all seams.",
                    "Apply three coats of joint compound.",
                    "Sand smooth and prime.",
                ),
                options=(
                    ChoiceOption(
                        id="finish-level",
                        label="Finish level",
                        choices=(
                            Choice("level-4", "Level 4"),
                            Choice("level-5", "Level 5 skim coat", 800, "Apply full skim coat for a level 5 finish."),
                        )
                    ),
                )
            ),
            JobType(
                id="drywall-repair",
                name="Drywall Patch & Repair",
                base_price_low=200,
                base_price_high=800,
                days_low=1,
                days_high=1,
                warranty=_STANDARD_WARRANTY,
                exclusions=("Painting beyond patched areas",),
                base_scope=(
                    "Cut out damaged drywall.",
                    "Install patch and backing.",
                    "Tape, mud and sand patch to blend.",
                )
            ),
        )
    ),
    "roofing": Trade(
        id="roofing",
        name="Roofing",
        materials_ratio=0.40,
        labor_ratio=0.60,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="roof-replacement",
                name="Roof Replacement",
                base_price_low=8000,
                base_price_high=18000,
                days_low=2,
                days_high=4,
                warranty="Manufacturer shingle warranty. 5-year workmanship warranty.",
                exclusions=("Structural repairs", "Chimney rebuilding", "Skylight replacement"),
                base_scope=(
                    "Remove existing roofing down to deck.",
                    "Inspect and replace damaged decking.",
                    "Install ice and water shield at eaves and valleys.",
                    "Install synthetic underlayment.",
                    "Install new drip edge and flashing.",
                    "Install architectural shingles.",
                    "Install ridge vent.",
                    "Magnetic sweep and cleanup of property.",
                ),
                options=(
                    ChoiceOption(
                        id="shingle",
                        label="Roofing material",
                        choices=(
                            Choice("architectural", "Architectural shingle"),
                            Choice("designer", "Designer shingle", 2500, "Upgrade to designer laminated shingles."),
                            Choice("metal", "Standing seam metal", 9000, "Install standing seam metal roofing panels."),
                        )
                    ),
                    BooleanOption(
                        id="gutters",
                        label="Replace gutters",
                        price_delta=1800,
                        scope_addition="Remove old gutters and install new seamless aluminum gutters and downspouts."
                    ),
                )
            ),
            JobType(
                id="roof-repair",
                name="Roof Repair",
                base_price_low=500,
                base_price_high=2500,
                days_low=1,
                days_high=2,
                warranty="1-year warranty on repaired area.",
                exclusions=("Decking replacement beyond repair area",),
                base_scope=(
                    "Locate source of leak or damage.",
                    "Remove damaged shingles and underlayment.",
                    "Install matching shingles and flashing.",
                    "Seal and test repaired area.",
                )
            ),
        )
    ),
    "concrete": Trade(
        id="concrete",
        name="Concrete",
        materials_ratio=0.40,
        labor_ratio=0.60,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="driveway",
                name="Driveway Installation",
                base_price_low=4000,
                base_price_high=12000,
                days_low=2,
                days_high=5,
                warranty="1-year warranty on workmanship.",
                exclusions=("Permit fees", "Utility relocation", "Extensive grading", "Drainage systems"),
                base_scope=(
                    "Remove existing driveway surface.",
                    "Grade and compact sub-base.",
                    "Install gravel base and reinforcement.",
                    "Pour and finish concrete.",
                    "Cut control joints.",
                    "Cure and seal surface.",
                ),
                options=(
                    ChoiceOption(
                        id="finish",
                        label="Surface finish",
                        choices=(
                            Choice("broom", "Broom finish"),
                            Choice("stamped", "Stamped", 3000, "Apply stamped pattern and color hardener."),
                            Choice("exposed-aggregate", "Exposed aggregate", 2200, "Wash surface to expose decorative aggregate."),
                        )
                    ),
                )
            ),
            JobType(
                id="patio-slab",
                name="Patio Slab",
                base_price_low=2500,
                base_price_high=8000,
                days_low=2,
                days_high=5,
                warranty="1-year warranty on workmanship.",
                exclusions=("Permit fees", "Drainage systems"),
                base_scope=(
                    "Excavate and form patio area.",
                    "Install compacted gravel base.",
                    "Pour and finish concrete slab.",
                    "Cut control joints and cure.",
                )
            ),
        )
    ),
    "landscape": Trade(
        id="landscape",
        name="Landscaping",
        materials_ratio=0.45,
        labor_ratio=0.55,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="lawn-install",
                name="Lawn Installation",
                base_price_low=2000,
                base_price_high=6000,
                days_low=2,
                days_high=5,
                warranty="30-day establishment guarantee on sod.",
                exclusions=("Irrigation repairs", "Tree removal"),
                base_scope=(
                    "Remove existing turf and weeds.",
                    "Grade and amend soil.",
                    "Install sod or seed.",
                    "Initial watering and care instructions.",
                ),
                options=(
                    BooleanOption(
                        id="irrigation",
                        label="Irrigation system",
                        price_delta=2500,
                        scope_addition="Install zoned irrigation system with programmable controller."
                    ),
                )
            ),
            JobType(
                id="retaining-wall",
                name="Retaining Wall",
                base_price_low=3000,
                base_price_high=10000,
                days_low=3,
                days_high=7,
                warranty="2-year warranty on workmanship.",
                exclusions=("Engineering fees", "Permit fees"),
                base_scope=(
                    "Excavate and prepare footing.",
                    "Install drainage aggregate and pipe.",
                    "Build segmental block wall.",
                    "Backfill and compact.",
                )
            ),
        )
    ),
    "plumbing": Trade(
        id="plumbing",
        name="Plumbing",
        materials_ratio=0.30,
        labor_ratio=0.70,
        job_types=job_types(
            JobType(
                id="plumbing-repair",
                name="Plumbing Service & Repair",
                base_price_low=150,
                base_price_high=650,
                days_low=1,
                days_high=1,
                warranty="1-year warranty on parts and labor.",
                exclusions=("Major repiping", "Sewer line replacement"),
                base_scope=(
                    "Diagnose plumbing issue.",
                    "Repair or replace faulty components.",
                    "Test for leaks and proper operation.",
                )
            ),
            JobType(
                id="water-heater",
                name="Water Heater Replacement",
                base_price_low=1800,
                base_price_high=3500,
                days_low=1,
                days_high=1,
                warranty="1-year warranty on parts and labor.",
                exclusions=("Gas line extension", "Venting modifications"),
                base_scope=(
                    "Drain and disconnect existing water heater.",
                    "Haul away old unit.",
                    "Install new water heater with expansion tank.",
                    "Connect supply lines and test.",
                ),
                options=(
                    ChoiceOption(
                        id="heater-type",
                        label="Water heater type",
                        choices=(
                            Choice("tank", "Standard tank"),
                            Choice("tankless", "Tankless", 1500, "Install wall-mounted tankless water heater with descaling valves."),
                        )
                    ),
                )
            ),
            JobType(
                id="repipe",
                name="Whole House Repipe",
                base_price_low=8000,
                base_price_high=15000,
                days_low=3,
                days_high=5,
                warranty="2-year warranty on parts and labor.",
                exclusions=("Drywall finishing and painting", "Sewer line replacement"),
                base_scope=(
                    "Install new PEX supply lines throughout home.",
                    "Install new shutoff valves at fixtures.",
                    "Pressure test system.",
                    "Patch access openings.",
                )
            ),
        )
    ),
    "electrical": Trade(
        id="electrical",
        name="Electrical",
        materials_ratio=0.35,
        labor_ratio=0.65,
        job_types=job_types(
            JobType(
                id="electrical-repair",
                name="Electrical Service & Repair",
                base_price_low=150,
                base_price_high=500,
                days_low=1,
                days_high=1,
                warranty="1-year warranty on workmanship.",
                exclusions=("Panel upgrades", "Rewiring"),
                base_scope=(
                    "Diagnose electrical issue.",
                    "Repair or replace faulty devices.",
                    "Test circuits for proper operation.",
                )
            ),
            JobType(
                id="panel-upgrade",
                name="Panel Upgrade",
                base_price_low=2500,
                base_price_high=4500,
                days_low=1,
                days_high=2,
                warranty="1-year warranty on workmanship.",
                exclusions=("Utility service upgrade fees", "Drywall repair"),
                base_scope=(
                    "Pull permit and coordinate utility disconnect.",
                    "Remove existing panel.",
                    "Install new 200A panel and breakers.",
                    "Label circuits and schedule inspection.",
                ),
                options=(
                    BooleanOption(
                        id="ev-circuit",
                        label="EV charger circuit",
                        price_delta=650,
                        scope_addition="Run dedicated 240V circuit for EV charger."
                    ),
                    BooleanOption(
                        id="surge-protection",
                        label="Whole-home surge protection",
                        price_delta=350,
                        scope_addition="Install whole-home surge protective device at panel."
                    ),
                )
            ),
        )
    ),
    "hvac": Trade(
        id="hvac",
        name="HVAC",
        materials_ratio=0.55,
        labor_ratio=0.45,
        job_types=job_types(
            JobType(
                id="hvac-service",
                name="HVAC Service & Repair",
                base_price_low=150,
                base_price_high=500,
                days_low=1,
                days_high=1,
                warranty="90-day warranty on repairs.",
                exclusions=("Refrigerant recharge", "Major component replacement"),
                base_scope=(
                    "Inspect heating and cooling equipment.",
                    "Clean coils and replace filters.",
                    "Diagnose and repair faults.",
                    "Verify system operation.",
                )
            ),
            JobType(
                id="ac-install",
                name="AC Unit Installation",
                base_price_low=4500,
                base_price_high=12000,
                days_low=1,
                days_high=3,
                warranty="10-year manufacturer parts warranty. 1-year labor warranty.",
                exclusions=("Ductwork replacement", "Electrical panel upgrades"),
                base_scope=(
                    "Recover refrigerant and remove existing unit.",
                    "Set new condenser on pad.",
                    "Install matched evaporator coil.",
                    "Connect line set and electrical.",
                    "Charge and commission system.",
                ),
                options=(
                    BooleanOption(
                        id="smart-thermostat",
                        label="Smart thermostat",
                        price_delta=300,
                        scope_addition="Install and configure Wi-Fi smart thermostat."
                    ),
                )
            ),
        )
    ),
    "handyman": Trade(
        id="handyman",
        name="Handyman",
        materials_ratio=0.30,
        labor_ratio=0.70,
        job_types=job_types(
            JobType(
                id="general-repairs",
                name="General Repairs",
                base_price_low=200,
                base_price_high=800,
                days_low=1,
                days_high=1,
                warranty="90-day warranty on workmanship.",
                exclusions=("Licensed trade work", "Material upgrades"),
                base_scope=(
                    "Complete punch list of minor repairs.",
                    "Adjust doors, hardware and fixtures.",
                    "Cleanup of work areas.",
                )
            ),
            JobType(
                id="fixture-mounting",
                name="Fixture & TV Mounting",
                base_price_low=150,
                base_price_high=450,
                days_low=1,
                days_high=1,
                warranty="90-day warranty on workmanship.",
                exclusions=("In-wall wiring",),
                base_scope=(
                    "Locate studs and mount fixtures securely.",
                    "Level and align all mounted items.",
                )
            ),
        )
    ),
    "windows-doors": Trade(
        id="windows-doors",
        name="Windows & Doors",
        materials_ratio=0.60,
        labor_ratio=0.40,
        job_types=job_types(
            JobType(
                id="window-replacement",
                name="Window Replacement",
                base_price_low=5000,
                base_price_high=15000,
                days_low=1,
                days_high=3,
                warranty="Manufacturer warranty on windows. 1-year labor warranty.",
                exclusions=("Structural modifications", "Interior painting"),
                base_scope=(
                    "Remove existing windows.",
                    "Inspect and repair rough openings.",
                    "Install new windows level and square.",
                    "Insulate and seal around frames.",
                    "Install interior and exterior trim.",
                ),
                options=(
                    ChoiceOption(
                        id="glass",
                        label="Glass package",
                        choices=(
                            Choice("double-pane", "Double pane Low-E"),
                            Choice("triple-pane", "Triple pane", 2800, "Upgrade all units to triple-pane argon-filled glass."),
                        )
                    ),
                )
            ),
            JobType(
                id="door-installation",
                name="Door Installation",
                base_price_low=800,
                base_price_high=3500,
                days_low=1,
                days_high=1,
                warranty="1-year labor warranty.",
                exclusions=("Structural modifications", "Painting"),
                base_scope=(
                    "Remove existing door and frame.",
                    "Install new prehung door.",
                    "Install hardware and weatherstripping.",
                    "Adjust for proper swing and latch.",
                )
            ),
        )
    ),
    "fencing": Trade(
        id="fencing",
        name="Fencing",
        materials_ratio=0.50,
        labor_ratio=0.50,
        footage_billing=FootageBilling.LINEAR_FEET,
        job_types=job_types(
            JobType(
                id="fence-installation",
                name="Fence Installation",
                base_price_low=3000,
                base_price_high=8000,
                days_low=2,
                days_high=5,
                warranty="1-year warranty on workmanship. Manufacturer warranty on materials.",
                exclusions=("Permit fees", "Survey if required", "Tree/stump removal", "Grading"),
                base_scope=(
                    "Call utility locate service before digging.",
                    "Set posts in concrete.",
                    "Install rails and pickets.",
                    "Install gates and hardware.",
                    "Cleanup and haul away debris.",
                ),
                options=(
                    ChoiceOption(
                        id="fence-material",
                        label="Fence material",
                        choices=(
                            Choice("wood", "Wood privacy"),
                            Choice("vinyl", "Vinyl", 1500, "Install maintenance-free vinyl fence panels."),
                            Choice("aluminum", "Aluminum", 2200, "Install powder-coated aluminum fence panels."),
                        )
                    ),
                    BooleanOption(
                        id="extra-gate",
                        label="Additional gate",
                        price_delta=450,
                        scope_addition="Install additional walk gate with self-closing hinges."
                    ),
                )
            ),
            JobType(
                id="fence-repair",
                name="Fence Repair",
                base_price_low=200,
                base_price_high=1000,
                days_low=1,
                days_high=1,
                warranty="90-day warranty on workmanship.",
                exclusions=("Full section replacement",),
                base_scope=(
                    "Replace damaged pickets and rails.",
                    "Reset leaning posts.",
                )
            ),
        )
    ),
    "decks-patios": Trade(
        id="decks-patios",
        name="Decks & Patios",
        materials_ratio=0.45,
        labor_ratio=0.55,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="deck-construction",
                name="Deck Construction",
                base_price_low=8000,
                base_price_high=20000,
                days_low=5,
                days_high=10,
                warranty="2-year warranty on workmanship.",
                exclusions=("Permit fees", "Electrical work"),
                base_scope=(
                    "Set footings and posts.",
                    "Frame joists and beams.",
                    "Install decking boards.",
                    "Install railings and stairs.",
                ),
                options=(
                    ChoiceOption(
                        id="decking",
                        label="Decking material",
                        choices=(
                            Choice("pressure-treated", "Pressure-treated wood"),
                            Choice("composite", "Composite", 6000, "Install capped composite decking with hidden fasteners."),
                        )
                    ),
                    BooleanOption(
                        id="deck-lighting",
                        label="Deck lighting",
                        price_delta=900,
                        scope_addition="Install low-voltage post cap and stair lighting."
                    ),
                )
            ),
            JobType(
                id="deck-repair",
                name="Deck Repair",
                base_price_low=500,
                base_price_high=3000,
                days_low=1,
                days_high=3,
                warranty="1-year warranty on workmanship.",
                exclusions=("Structural rebuild",),
                base_scope=(
                    "Replace damaged boards.",
                    "Secure loose railings.",
                    "Clean and seal deck surface.",
                )
            ),
        )
    ),
}
