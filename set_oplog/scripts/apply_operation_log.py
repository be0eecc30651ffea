import logging

from vistautils.parameters import Parameters
from vistautils.parameters_only_entrypoint import parameters_only_entry_point

from set_oplog.interpreter import apply_operation_log
from set_oplog.operation import MALFORMED_PAYLOAD_POLICIES, REJECT
from set_oplog.rendering import render_report


def main(params: Parameters):
    input_file_path = params.existing_file("input_file")
    output_file_path = params.optional_creatable_file("output_file")
    malformed_payload = params.string(
        "malformed_payload", valid_options=MALFORMED_PAYLOAD_POLICIES, default=REJECT
    )
    include_type_tags = params.boolean("print_member_types", default=False)

    result = apply_operation_log(input_file_path, malformed_payload=malformed_payload)
    report = render_report(result, include_type_tags=include_type_tags)

    for line in report:
        print(line)

    if output_file_path:
        logging.info("Writing report to: %s", str(output_file_path.absolute()))
        output_file_path.write_text("\n".join(report) + "\n")


if __name__ == "__main__":
    parameters_only_entry_point(main)
