"""DLR (Digital Land Records) mock dataset, keyed by propertyId."""

DLR_DATABASE: dict[str, dict] = {
    "MH1234567": {
        "propertyId": "MH1234567",
        "registrationNumber": "REG/MH/2022/12345",
        "ownerDetails": [
            {
                "name": "Rajesh Kumar",
                "identificationNumber": "ABCDE1234F",
                "identificationType": "PAN",
                "ownershipType": "JOINT",
            },
            {
                "name": "Priya Kumar",
                "identificationNumber": "FGHIJ5678K",
                "identificationType": "PAN",
                "ownershipType": "JOINT",
            },
        ],
        "propertyDetails": {
            "address": "Survey 123/4A, Pali Hill, Bandra West, Mumbai - 400050",
            "area": "111.48",
            "areaUnit": "SQ_M",
            "type": "RESIDENTIAL",
            "boundaries": {
                "north": "Pali Hill Road",
                "south": "Survey 123/5",
                "east": "Survey 124",
                "west": "Survey 122",
            },
        },
        "encumbrances": [],
        "transactionHistory": [
            {
                "date": "2022-01-10",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Suresh Mehta"},
                    {"role": "BUYER", "name": "Rajesh Kumar"},
                ],
                "amount": 25000000,
                "documentReference": "SD/MH/2022/12345",
            },
            {
                "date": "2022-02-05",
                "type": "OTHER",
                "parties": [{"role": "OTHER", "name": "Rajesh Kumar"}],
                "documentReference": "MUT/MH/2022/0789",
            },
        ],
        "documents": [
            {
                "type": "MUTATION_ENTRY",
                "number": "MUT/MH/2022/0789",
                "issuedDate": "2022-02-05",
                "issuedBy": "Talathi Office, Bandra",
                "status": "VALID",
            },
            {
                "type": "SALE_DEED",
                "number": "SD/MH/2022/12345",
                "issuedDate": "2022-01-12",
                "issuedBy": "Sub-Registrar Office, Bandra",
            },
        ],
        "landRecordDetails": {
            "khasraNumber": "123/4A",
            "khataNumber": "KH-4512",
            "landUse": "RESIDENTIAL",
            "landClassification": "NON_AGRICULTURAL",
            "revenueDistrict": "Mumbai Suburban",
            "tehsil": "Andheri",
            "village": "Bandra",
        },
        "lastUpdated": "2023-03-01T08:00:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
    "MH7654321": {
        "propertyId": "MH7654321",
        "registrationNumber": "REG/MH/2021/54321",
        "ownerDetails": [
            {
                "name": "ABC Properties Private Limited",
                "identificationNumber": "U12345MH2010PLC123456",
                "identificationType": "CIN",
                "ownershipType": "CORPORATE",
            }
        ],
        "propertyDetails": {
            "address": "456, Marine Drive, Mumbai - 400020",
            "area": "464.5",
            "areaUnit": "SQ_M",
            "type": "COMMERCIAL",
        },
        "encumbrances": [],
        "transactionHistory": [],
        "documents": [],
        "landRecordDetails": {
            "khasraNumber": "CS-1123",
            "khataNumber": "KH-8821",
            "landUse": "COMMERCIAL",
            "landClassification": "NON_AGRICULTURAL",
            "revenueDistrict": "Mumbai City",
            "tehsil": "Fort",
            "village": "Marine Lines",
        },
        "lastUpdated": "2022-10-01T12:00:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
    "DL8765432": {
        "propertyId": "DL8765432",
        "registrationNumber": "REG/DL/2020/87654",
        "ownerDetails": [
            {
                "name": "Amit Sharma",
                "identificationNumber": "DEFGH1234I",
                "identificationType": "PAN",
                "ownershipType": "SOLE",
            }
        ],
        "propertyDetails": {
            "address": "789, Vasant Vihar, New Delhi - 110057",
            "area": "297.3",
            "areaUnit": "SQ_M",
            "type": "RESIDENTIAL",
        },
        "encumbrances": [
            {
                "type": "MORTGAGE",
                "holder": "HDFC Bank",
                "amount": 15000000,
                "dateCreated": "2020-08-15",
                "status": "ACTIVE",
            }
        ],
        "transactionHistory": [],
        "documents": [
            {
                "type": "KHATAUNI",
                "number": "KTN/DL/SW/2020/3321",
                "issuedDate": "2020-09-10",
                "issuedBy": "Tehsildar, Vasant Vihar",
            }
        ],
        "landRecordDetails": {
            "khasraNumber": "442/1",
            "khataNumber": "KH-1190",
            "landUse": "RESIDENTIAL",
            "landClassification": "NON_AGRICULTURAL",
            "revenueDistrict": "South West Delhi",
            "tehsil": "Vasant Vihar",
            "village": "Munirka",
        },
        "lastUpdated": "2022-06-30T07:45:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
    "KA9876543": {
        "propertyId": "KA9876543",
        "registrationNumber": "REG/KA/2020/98765",
        "ownerDetails": [
            {
                "name": "Venkatesh Rao",
                "identificationNumber": "QRSTU5678V",
                "identificationType": "PAN",
                "ownershipPercentage": 100,
                "ownershipType": "SOLE",
                "contactInformation": {
                    "address": "789, Indiranagar, Bangalore - 560038",
                    "phone": "+91-9876543213",
                },
            }
        ],
        "propertyDetails": {
            "address": "789, Indiranagar, Bangalore - 560038",
            "area": "2400",
            "areaUnit": "SQ_FT",
            "type": "RESIDENTIAL",
            "subType": "INDEPENDENT_HOUSE",
            "coordinates": {"latitude": 12.9784, "longitude": 77.6408},
        },
        "encumbrances": [],
        "transactionHistory": [
            {
                "date": "2020-02-20",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Lakshmi Narayan"},
                    {"role": "BUYER", "name": "Venkatesh Rao", "identificationNumber": "QRSTU5678V"},
                ],
                "amount": 18000000,
                "documentReference": "SD/KA/2020/98765",
            }
        ],
        "documents": [
            {
                "type": "RTC",
                "number": "RTC/KA/BLR/2020/5567",
                "issuedDate": "2020-03-01",
                "issuedBy": "Bhoomi Centre, Bangalore East",
            }
        ],
        "landRecordDetails": {
            "khasraNumber": "56/2",
            "khataNumber": "KH-3345",
            "landUse": "RESIDENTIAL",
            "landClassification": "CONVERTED",
            "revenueDistrict": "Bangalore Urban",
            "tehsil": "Bangalore East",
            "village": "Binnamangala",
        },
        "lastUpdated": "2022-05-12T10:00:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
    "KA1122334": {
        "propertyId": "KA1122334",
        "registrationNumber": "REG/KA/2021/11223",
        "ownerDetails": [
            {
                "name": "XYZ Developers Limited",
                "identificationNumber": "L67890KA2015PLC654321",
                "identificationType": "CIN",
                "ownershipType": "CORPORATE",
            }
        ],
        "propertyDetails": {
            "address": "101, Koramangala, Bangalore - 560034",
            "area": "50000",
            "areaUnit": "SQ_FT",
            "type": "RESIDENTIAL",
            "subType": "RESIDENTIAL_COMPLEX",
        },
        "encumbrances": [
            {
                "type": "MORTGAGE",
                "holder": "Axis Bank",
                "amount": 350000000,
                "dateCreated": "2016-08-01",
                "dateExpiry": "2026-07-31",
                "status": "ACTIVE",
                "details": "Project finance",
            }
        ],
        "transactionHistory": [],
        "documents": [],
        "landRecordDetails": {
            "khasraNumber": "88/1B",
            "khataNumber": "KH-7781",
            "landUse": "RESIDENTIAL",
            "landClassification": "CONVERTED",
            "revenueDistrict": "Bangalore Urban",
            "tehsil": "Bangalore South",
            "village": "Koramangala",
        },
        "lastUpdated": "2023-01-15T09:30:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
    "TN5544332": {
        "propertyId": "TN5544332",
        "registrationNumber": "REG/TN/2019/55443",
        "ownerDetails": [
            {
                "name": "XYZ Developers Limited",
                "identificationNumber": "L67890KA2015PLC654321",
                "identificationType": "CIN",
                "ownershipType": "CORPORATE",
            }
        ],
        "propertyDetails": {
            "address": "Plot 78, OMR Road, Chennai - 600097",
            "area": "100000",
            "areaUnit": "SQ_FT",
            "type": "COMMERCIAL",
            "subType": "IT_PARK",
        },
        "encumbrances": [],
        "transactionHistory": [
            {
                "date": "2019-03-25",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "OMR Infra Holdings"},
                    {"role": "BUYER", "name": "XYZ Developers Limited"},
                ],
                "amount": 800000000,
                "documentReference": "SD/TN/2019/55443",
            }
        ],
        "documents": [
            {
                "type": "PATTA",
                "number": "PATTA/TN/CHN/2019/0912",
                "issuedDate": "2019-05-02",
                "issuedBy": "Tahsildar, Sholinganallur",
            }
        ],
        "landRecordDetails": {
            "khasraNumber": "312/2",
            "khataNumber": "PT-0912",
            "landUse": "COMMERCIAL",
            "landClassification": "NON_AGRICULTURAL",
            "revenueDistrict": "Chengalpattu",
            "tehsil": "Sholinganallur",
            "village": "Karapakkam",
        },
        "lastUpdated": "2022-12-20T15:00:00Z",
        "dataSource": "DLR",
        "dlrSpecificField": "Sample DLR specific data",
    },
}
