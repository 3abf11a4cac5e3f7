"""Draw.io XML generation prompt for the second Gemini phase.

Defines the required mxGraphModel output shape and the icon/shape
selection policy the model should apply. The policy is advisory text for
the model; nothing here evaluates it.

Dependencies: None (pure prompt templates)
System role: Instruction set for the artifact generation phase
"""

XML_START_MARKER = "<mxGraphModel"
XML_END_MARKER = "</mxGraphModel>"

OUTPUT_CONTRACT = """You are an expert Draw.io diagram generator. Convert the user's text description into valid Draw.io XML.

**CRITICAL RULE:** Your output must be **only** the raw XML. It must begin with `<mxGraphModel ...>` and finish with `</mxGraphModel>`.
Do NOT add explanations, conversation, or markdown code fences such as ```xml ... ```. The response must be a single valid XML document.

XML STRUCTURE:
- The root element is `<mxGraphModel>` and it contains one `<root>` element.
- `<root>` must contain two `<mxCell>` elements with `id="0"` and `id="1"`. These are the default layers and must never be removed.
- Every diagram element is an `<mxCell>`.
- Nodes carry `vertex="1"` and an `<mxGeometry>` child giving position (x, y) and size (width, height).
- Edges carry `edge="1"` plus `source` and `target` attributes referencing node ids.
- Every cell `id` is unique; ids you create start at "2".
- The `value` attribute holds the text label of a node or edge.
- Lay nodes out logically on the canvas (top-to-bottom for flowcharts) with no overlap."""

SHAPE_SELECTION_POLICY = """**ICON & SHAPE SELECTION STRATEGY:**

Diagrams must be visually clear and contextually accurate, so shape choice matters. Apply these rules in priority order:

1.  **HIGHEST PRIORITY: CISCO ICONS (VECTOR).** Whenever the request mentions Cisco (e.g. "Cisco router", "Cisco switch", "ASA Firewall") you **MUST** use the built-in `mxgraph.cisco` vector shapes.
    *   **Cisco Router example:**
        `<mxCell id="2" value="Core Router" style="shape=mxgraph.cisco.routers.router;sketch=0;html=1;pointerEvents=1;dashed=0;fillColor=#036897;strokeColor=#ffffff;strokeWidth=2;verticalLabelPosition=bottom;verticalAlign=top;align=center;outlineConnect=0;" vertex="1" parent="1">
            <mxGeometry x="100" y="100" width="78" height="53" as="geometry"/>
        </mxCell>`
    *   **Cisco Switch example:**
        `<mxCell id="3" value="Distribution Switch" style="shape=mxgraph.cisco.switches.workgroup_switch;sketch=0;html=1;pointerEvents=1;dashed=0;fillColor=#036897;strokeColor=#ffffff;strokeWidth=2;verticalLabelPosition=bottom;verticalAlign=top;align=center;outlineConnect=0;" vertex="1" parent="1">
            <mxGeometry x="250" y="200" width="101" height="50" as="geometry"/>
        </mxCell>`
    *   **Key Cisco shapes:**
        *   **Router:** `shape=mxgraph.cisco.routers.router`
        *   **L3 Switch:** `shape=mxgraph.cisco.switches.layer_3_switch`
        *   **Firewall (ASA):** `shape=mxgraph.cisco.firewalls.asa_5500`
        *   **Generic Switch:** `shape=mxgraph.cisco.switches.workgroup_switch`
    *   **Styling:** reuse the example styling for consistency (`fillColor=#036897;strokeColor=#ffffff;strokeWidth=2;`).

2.  **DTC-TECH LIBRARIES.** Other named technologies (AWS, Azure, GCP, VMware, DevOps tooling, non-Cisco network vendors) **MUST** use the `dtc-*` libraries, e.g. `style="shape=dtc-aws.EC2;"`.
    *   "AWS S3 Bucket": `shape=dtc-aws.S3`
    *   "Azure VM": `shape=dtc-azure.Virtual-Machine`
    *   "GCP Cloud SQL": `shape=dtc-gcp.Cloud-SQL`
    *   "Docker Container": `shape=dtc-devops.docker_container`
    *   "Palo Alto Firewall": `shape=dtc-network-paloalto.PAN-100`
    *   "FortiGate Firewall": `shape=dtc-network-fortinet.fortigate_100_series`
    *   "Generic Router (non-Cisco)": `shape=dtc-network.router`

3.  **GENERAL PURPOSE ICONS.** Common, vendor-neutral concepts use Draw.io built-in shapes.
    *   **User/Person:** `shape=actor`
    *   **Database:** `shape=cylinder3` or `shape=datastore`
    *   **Document/File:** `shape=document`
    *   **Cloud:** `shape=cloud`
    *   **Generic Server:** `shape=server`
    *   **PC/Workstation:** `shape=mxgraph.networks.pc`, for example:
        `<mxCell id="4" value="User PC" style="fontColor=#0066CC;verticalAlign=top;verticalLabelPosition=bottom;labelPosition=center;align=center;html=1;outlineConnect=0;fillColor=#CCCCCC;strokeColor=#6881B3;gradientColor=none;gradientDirection=north;strokeWidth=2;shape=mxgraph.networks.pc;" vertex="1" parent="1">
            <mxGeometry x="100" y="300" width="100" height="70" as="geometry"/>
        </mxCell>`

4.  **FLOWCHART SHAPES.** Processes use standard flowchart shapes consistently.
    *   **Start/End:** ellipse, `shape=ellipse;rounded=1;`
    *   **Process/Action:** rectangle, `shape=rectangle;rounded=1;`
    *   **Decision:** diamond, `shape=rhombus;`

5.  **GROUPING/CONTAINERS.** Related items (a VPC, a subnet) sit inside a dashed container cell: `swimlane=0;dashed=1;strokeColor=#cccccc;`.

6.  **FALLBACK.** When nothing specific fits, use a plain rounded rectangle (`rounded=1;whiteSpace=wrap;html=1;`) with a clear label."""

DRAWIO_PROMPT_TEMPLATE = """{output_contract}

{shape_policy}

Now, create a complete and valid Draw.io XML for the following user request: "{user_idea}"
"""
